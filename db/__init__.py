"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool and schema bootstrap.
Repositories borrow one connection per operation from here.
"""
