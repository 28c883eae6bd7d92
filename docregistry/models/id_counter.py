"""IdCounter ORM - named persistent counters backing the IdIssuer.

Invariants:
    - value is the last id handed out (0 before the first issue)
    - Rows only ever increase; no code path decrements or deletes them
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from docregistry.db.base import Base


class IdCounter(Base):
    __tablename__ = "id_counters"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
