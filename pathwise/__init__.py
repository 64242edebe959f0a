"""Pathwise: AI-generated learning roadmaps with progress tracking."""
