"""Peer review assignment and tracking."""
from .router import router as peer_reviews_router
from .service import PeerReviewService

__all__ = ["peer_reviews_router", "PeerReviewService"]
