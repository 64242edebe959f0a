"""API routes."""

from pathwise.api.routes import progress, roadmaps, visualize

__all__ = ["roadmaps", "progress", "visualize"]
