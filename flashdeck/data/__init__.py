"""
Persistence layer. Importing this package maps the models and registers the
consistency guard hooks.
"""

from flashdeck.data import guards  # noqa: F401
from flashdeck.data.models import Base

__all__ = ["Base"]
