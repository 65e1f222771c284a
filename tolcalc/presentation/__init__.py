"""Display helpers: static labels, number formatting and the view model."""

from .formatting import format_number, format_tolerance
from .view import ToleranceView, present

__all__ = ["format_number", "format_tolerance", "ToleranceView", "present"]
