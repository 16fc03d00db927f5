"""
repositories/exceptions.py
--------------------------
The single error kind surfaced by the data access layer.
"""

from typing import Optional


class StoreError(RuntimeError):
    """
    Raised when talking to the data store fails, or when a repository
    precondition such as a required id is violated.

    Wraps lower-level psycopg2 errors; the original is kept on ``cause``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)
