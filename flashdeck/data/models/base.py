"""
Declarative base and column types shared by all models.
"""

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Native JSONB on PostgreSQL, plain JSON text elsewhere
JSONDocument = JSON().with_variant(JSONB(), "postgresql")
