"""Database models."""

from pathwise.models.progress import ProgressRecord
from pathwise.models.roadmap import Roadmap, RoadmapTopic

__all__ = [
    "Roadmap",
    "RoadmapTopic",
    "ProgressRecord",
]
