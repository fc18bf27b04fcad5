"""View-model projection consumed by rendering adapters."""

from .projector import Frame, FrameLine, expand_tabs, project, status_line

__all__ = ["Frame", "FrameLine", "expand_tabs", "project", "status_line"]
