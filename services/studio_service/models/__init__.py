"""Studio Service models package."""

from services.studio_service.models.core import StudioProfile

__all__ = [
    "StudioProfile",
]
