"""Viewport-aware placement of the date flyout."""

from __future__ import annotations

import logging

from filterdeck.core.config import FLYOUT_WIDTH, VIEWPORT_PADDING
from filterdeck.core.models import FlyoutAlignment, FlyoutPlacement, Rect

logger = logging.getLogger(__name__)


def resolve_position(
    trigger: Rect,
    viewport_width: float,
    flyout_width: float = FLYOUT_WIDTH,
    padding: float = VIEWPORT_PADDING,
) -> FlyoutAlignment:
    """Choose the direction the flyout opens in.

    The flyout opens to the right by default and only flips to the left
    when it would overflow the right viewport edge while fitting on the
    left. When both sides overflow the default is kept and the caller is
    expected to clamp the width with clamp_flyout_width().

    Args:
        trigger: Bounding rectangle of the trigger control.
        viewport_width: Width of the visible area.
        flyout_width: Nominal flyout width.
        padding: Safety margin kept from the viewport edges.

    Returns:
        FlyoutAlignment.LEFT or FlyoutAlignment.RIGHT.
    """
    overflows_right = trigger.right + flyout_width > viewport_width - padding
    overflows_left = trigger.left - flyout_width < padding

    if overflows_right and not overflows_left:
        return FlyoutAlignment.LEFT
    return FlyoutAlignment.RIGHT


def clamp_flyout_width(
    flyout_width: float = FLYOUT_WIDTH,
    viewport_width: float | None = None,
    padding: float = VIEWPORT_PADDING,
) -> float:
    """Shrink the flyout so it fits inside the padded viewport."""
    if viewport_width is None:
        return flyout_width
    return max(0, min(flyout_width, viewport_width - 2 * padding))


def place_flyout(
    trigger: Rect,
    viewport_width: float,
    flyout_width: float = FLYOUT_WIDTH,
    padding: float = VIEWPORT_PADDING,
) -> FlyoutPlacement:
    """Resolve alignment, left edge and width of the flyout in one step.

    Must be called on every open: the trigger can move between opens.
    """
    alignment = resolve_position(trigger, viewport_width, flyout_width, padding)
    width = clamp_flyout_width(flyout_width, viewport_width, padding)

    if alignment is FlyoutAlignment.LEFT:
        x = trigger.right - width
    else:
        x = trigger.left

    logger.debug(
        "Flyout placed %s at x=%.1f (width %.1f, viewport %.1f)",
        alignment.value,
        x,
        width,
        viewport_width,
    )
    return FlyoutPlacement(alignment=alignment, x=x, width=width)


def resolve_flyout_top(
    trigger: Rect,
    flyout_height: float,
    viewport_height: float,
    gap: float = 0,
) -> float:
    """Top edge of the flyout: below the trigger, or above when it does not fit.

    The result is clamped into the viewport so a flyout taller than the room
    on either side still stays fully visible.

    Args:
        trigger: Bounding rectangle of the trigger control.
        flyout_height: Rendered flyout height.
        viewport_height: Height of the visible area.
        gap: Space kept between trigger and flyout.

    Returns:
        Y coordinate of the flyout's top edge.
    """
    top = trigger.bottom + gap
    if top + flyout_height > viewport_height:
        top = trigger.top - gap - flyout_height
    return max(0, min(top, viewport_height - flyout_height))
