from __future__ import annotations

FACET_COLUMN_MIN_WIDTH = 26
FACET_COLUMNS = 3
SHELL_CHROME_WIDTH = 12
WIDE_MIN_WIDTH = 150
WIDE_MIN_HEIGHT = 40
NORMAL_MIN_HEIGHT = 30
COMPACT_PANEL_HEIGHT = 8


def resolve_layout_mode(width: int, height: int, requested_mode: str) -> str:
    """Pick a layout; "auto" falls back to compact once three facet columns no longer fit."""
    if requested_mode != "auto":
        return requested_mode
    if width >= WIDE_MIN_WIDTH and height >= WIDE_MIN_HEIGHT:
        return "wide"
    if width >= FACET_COLUMNS * FACET_COLUMN_MIN_WIDTH + SHELL_CHROME_WIDTH and height >= NORMAL_MIN_HEIGHT:
        return "normal"
    return "compact"


def facet_panel_height(height: int, layout_mode: str) -> int:
    if layout_mode == "compact":
        return COMPACT_PANEL_HEIGHT
    limit = 18 if layout_mode == "wide" else 14
    return max(COMPACT_PANEL_HEIGHT, min(limit, height // 3))


def card_width(viewport_width: int, layout_mode: str) -> int:
    width = max(40, viewport_width)
    if layout_mode == "wide":
        return min(160, width - 8)
    if layout_mode == "normal":
        return width - 4
    return width - 2
