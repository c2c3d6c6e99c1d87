# Re-export the main Base class from db.py for matching models
# so all models share the same metadata
from db import Base

__all__ = ["Base"]
