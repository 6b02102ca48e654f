"""UI."""

from tzpatch.ui.reporter import Reporter

__all__ = ["Reporter"]
