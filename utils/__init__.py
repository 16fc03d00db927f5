"""
utils/ - Shared helpers
=======================
Logging setup and SQL naming helpers used by every other layer.
"""
