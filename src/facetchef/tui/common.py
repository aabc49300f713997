from __future__ import annotations

from .layout import card_width, facet_panel_height
from .textual import Screen
from .theme import TUI_THEME_NAME, TUI_THEMES

DEFAULT_HEADER_ICON = "🍲"
LAYOUT_CLASSES = ("layout-compact", "layout-normal", "layout-wide")
DENSITY_CLASSES = ("density-cozy", "density-compact")


def header_icon(screen: Screen) -> str:
    app = getattr(screen, "app", None)
    cfg = getattr(app, "cfg", None) if app else None
    icon = getattr(getattr(cfg, "tui", None), "header_icon", None)
    if icon is None:
        return DEFAULT_HEADER_ICON
    text = str(icon).strip()
    return text or DEFAULT_HEADER_ICON


def apply_theme(app, theme_name: str = TUI_THEME_NAME) -> None:
    theme = TUI_THEMES.get(theme_name)
    if theme is not None:
        app.register_theme(theme)
        app.theme = theme_name


def current_layout_mode(screen: Screen) -> str:
    app = getattr(screen, "app", None)
    mode = getattr(app, "tui_layout_mode", "normal") if app else "normal"
    return str(mode)


def sync_layout_classes(node, layout_mode: str, density: str) -> None:
    for class_name in LAYOUT_CLASSES:
        node.set_class(class_name == f"layout-{layout_mode}", class_name)
    for class_name in DENSITY_CLASSES:
        node.set_class(class_name == f"density-{density}", class_name)


def sync_screen_layout(screen: Screen) -> None:
    app = getattr(screen, "app", None)
    if app is None:
        return
    mode = str(getattr(app, "tui_layout_mode", "normal"))
    density = str(getattr(app, "tui_density", "cozy"))
    sync_layout_classes(screen, mode, density)


def apply_browse_sizes(screen: Screen) -> None:
    size = getattr(screen, "size", None)
    width = getattr(size, "width", 0)
    height = getattr(size, "height", 0)
    if not isinstance(width, int) or width <= 0:
        return
    mode = current_layout_mode(screen)
    screen.query_one("#browse-card").styles.width = card_width(width, mode)

    panel_height = facet_panel_height(height, mode)
    if mode == "compact":
        screen.query_one("#facet-lists").styles.height = "auto"
        for panel in screen.query(".facet-panel"):
            panel.styles.height = panel_height
    else:
        screen.query_one("#facet-lists").styles.height = panel_height
        for panel in screen.query(".facet-panel"):
            panel.styles.height = "1fr"
