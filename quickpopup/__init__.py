"""quickpopup - text tools behind the selection popup."""

__version__ = "0.1.0"

from quickpopup.popup import Placement, Rect, Viewport, calculate_popup_position
from quickpopup.text import ParagraphSplitter, split_into_paragraphs

__all__ = [
    "ParagraphSplitter",
    "Placement",
    "Rect",
    "Viewport",
    "calculate_popup_position",
    "split_into_paragraphs",
]
