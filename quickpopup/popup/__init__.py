"""Popup geometry."""

from quickpopup.popup.position import (
    Orientation,
    Placement,
    Rect,
    Viewport,
    calculate_popup_position,
    has_collision,
)

__all__ = [
    "Orientation",
    "Placement",
    "Rect",
    "Viewport",
    "calculate_popup_position",
    "has_collision",
]
