"""
utils/naming.py
---------------
Helpers for building SQL identifiers from configuration.
"""

import re
from typing import Optional

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def qualify_table(schema: Optional[str], table: str) -> str:
    """
    Form a ``schema.table`` name, or just ``table`` when no schema is set.

    Names come from configuration, not callers, and are baked into
    statement text, so anything that is not a plain identifier is rejected.

    Raises:
        ValueError: If the schema or table is not a plain SQL identifier.
    """
    for part in (schema, table):
        if part is not None and not _IDENTIFIER.match(part):
            raise ValueError(f"Invalid SQL identifier: {part!r}")
    return f"{schema}.{table}" if schema else table
