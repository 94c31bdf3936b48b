"""Popup placement next to a text selection.

Pure rectangle geometry in viewport coordinates: the popup is centred over
the selection, placed below or above it and kept inside the screen margins
without covering the selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from quickpopup.config.schema import PopupSettings


class Orientation(str, Enum):
    """Side of the selection the popup is shown on."""

    ABOVE = "above"
    BELOW = "below"


@dataclass(frozen=True)
class Rect:
    top: float
    left: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


@dataclass(frozen=True)
class Placement:
    top: float
    left: float
    orientation: Orientation

    def to_dict(self) -> dict[str, float | str]:
        return {"top": self.top, "left": self.left, "orientation": self.orientation.value}


def calculate_popup_position(
    selection: Rect,
    popup: Rect,
    viewport: Viewport,
    settings: PopupSettings | None = None,
) -> Placement:
    """Place *popup* next to *selection* without overlapping it.

    Only the popup's width and height are used; its own top/left are ignored.
    """
    settings = settings or PopupSettings()

    left = _horizontal_position(selection, popup, viewport, settings)
    top, orientation = _vertical_position(selection, popup, viewport, settings)
    placement = Placement(top=top, left=left, orientation=orientation)

    logger.debug(
        f"Popup placement: selection=({selection.top}, {selection.left}, "
        f"{selection.bottom}, {selection.right}) popup=({top}, {left}, "
        f"{top + popup.height}, {left + popup.width}) "
        f"gap={top - selection.bottom} orientation={orientation.value}"
    )

    if has_collision(selection, placement, popup):
        logger.warning("Popup overlaps selection, forcing fallback position")
        return _force_safe_position(selection, popup, viewport, settings)

    return placement


def has_collision(selection: Rect, placement: Placement, popup: Rect) -> bool:
    """Check whether the placed popup overlaps the selection (edges inclusive)."""
    popup_bottom = placement.top + popup.height
    popup_right = placement.left + popup.width

    vertical = not (popup_bottom < selection.top or placement.top > selection.bottom)
    horizontal = not (popup_right < selection.left or placement.left > selection.right)
    return vertical and horizontal


def _horizontal_position(
    selection: Rect, popup: Rect, viewport: Viewport, settings: PopupSettings
) -> float:
    """Centre over the selection, clamped to the screen margins."""
    centered = selection.left + selection.width / 2 - popup.width / 2
    min_left = settings.screen_margin
    max_left = viewport.width - popup.width - settings.screen_margin
    return max(min_left, min(centered, max_left))


def _vertical_position(
    selection: Rect, popup: Rect, viewport: Viewport, settings: PopupSettings
) -> tuple[float, Orientation]:
    margin = settings.screen_margin
    above_top = selection.top - popup.height - settings.total_offset
    below_top = selection.bottom + settings.total_offset

    candidates = {
        Orientation.BELOW: (below_top, below_top + popup.height <= viewport.height - margin),
        Orientation.ABOVE: (above_top, above_top >= margin),
    }
    preferred = Orientation(settings.prefer)
    other = Orientation.ABOVE if preferred is Orientation.BELOW else Orientation.BELOW

    for side in (preferred, other):
        top, fits = candidates[side]
        if fits:
            return top, side

    # Neither side fits: take the roomier one and clamp
    space_above = selection.top - margin
    space_below = viewport.height - selection.bottom - margin
    if space_above >= space_below:
        return max(margin, above_top), Orientation.ABOVE
    return max(margin, min(viewport.height - popup.height - margin, below_top)), Orientation.BELOW


def _force_safe_position(
    selection: Rect, popup: Rect, viewport: Viewport, settings: PopupSettings
) -> Placement:
    """Fallback after a collision: above if it fits, else below and clamped."""
    margin = settings.screen_margin
    top = selection.top - popup.height - settings.total_offset
    orientation = Orientation.ABOVE

    if top < margin:
        top = selection.bottom + settings.total_offset
        orientation = Orientation.BELOW
        if top + popup.height > viewport.height - margin:
            top = max(margin, viewport.height - popup.height - margin)

    left = _horizontal_position(selection, popup, viewport, settings)
    return Placement(top=top, left=left, orientation=orientation)
