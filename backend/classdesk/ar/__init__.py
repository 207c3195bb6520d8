"""Built-in AR resource library."""
from .router import router as ar_router

__all__ = ["ar_router"]
