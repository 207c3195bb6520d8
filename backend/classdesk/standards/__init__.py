"""Learning standards reference data and mastery."""
from .router import router as standards_router
from .service import StandardsService

__all__ = ["standards_router", "StandardsService"]
