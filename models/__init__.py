"""
models/ - Domain Models
=======================
Plain dataclasses handed between repositories and callers.
"""
