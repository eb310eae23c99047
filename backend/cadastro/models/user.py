"""User ORM — one row per successful registration.

Invariants:
    - id is INTEGER PRIMARY KEY AUTOINCREMENT: assigned by SQLite, never reused
    - name/email/password are free-form TEXT (rules enforced before insert)
    - password holds a bcrypt hash, never the plaintext

Design Decisions:
    - sqlite_autoincrement: ids keep increasing even after rows are removed by hand
    - Columns nullable to match the historical table layout of existing database.db files
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from cadastro.db.base import Base


class User(Base):
    """Stored user record."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text)
    email: Mapped[str | None] = mapped_column(Text)
    password: Mapped[str | None] = mapped_column(Text)
