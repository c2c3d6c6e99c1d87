# Export all matching models for easy imports
from .base import Base
from .provider_profile import ProviderProfile

__all__ = [
    "Base",
    "ProviderProfile",
]
