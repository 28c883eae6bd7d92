"""ORM Models - SQLAlchemy declarative models for the registry tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from docregistry.models.document_record import DocumentRecord  # noqa: F401
from docregistry.models.id_counter import IdCounter  # noqa: F401
