"""Database Infrastructure — SQLAlchemy Base shared by all ORM models.

Invariants:
    - Single async engine per process, owned by infrastructure.database.Database

Design Decisions:
    - aiosqlite driver for the embedded SQLite file (native async, no server process)
"""
