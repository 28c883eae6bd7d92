"""DocumentRecord ORM - one row per document, body holds the encoded Document.

Invariants:
    - id is the DocumentId issued by the IdIssuer (never autoincremented by the DB)
    - body is document_codec output; it is the single source of truth for the document
    - is_deleted / updated_at mirror the body for operators querying the table directly

Design Decisions:
    - Opaque LargeBinary body: the store is a key-value map, schema changes to
      Document never need a migration
    - BigInteger id: signed 64-bit, so MAX_STORABLE_ID caps what the table can hold
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Boolean, DateTime, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column

from docregistry.db.base import Base

MAX_STORABLE_ID: int = 2**63 - 1


class DocumentRecord(Base):
    """Stored document row."""
    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False,
    )
    body: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
