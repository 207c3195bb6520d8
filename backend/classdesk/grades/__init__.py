"""Grade preview and CSV export."""
from .router import router as grades_router
from .service import GradeExportService

__all__ = ["grades_router", "GradeExportService"]
