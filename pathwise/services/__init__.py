"""Service layer modules."""

from pathwise.services import (
    progress_service,
    roadmap_service,
    store,
    visualization_service,
)

__all__ = [
    "progress_service",
    "roadmap_service",
    "store",
    "visualization_service",
]
