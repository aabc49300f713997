from __future__ import annotations

from ..catalog import Catalog
from ..config import EffectiveConfig
from ..pipeline import FilterSession
from .common import apply_theme, sync_layout_classes
from .layout import resolve_layout_mode
from .screens.browse import BrowseScreen
from .textual import App
from .theme import APP_CSS


class FacetchefApp(App):
    TITLE = "facetchef"
    CSS = APP_CSS
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, cfg: EffectiveConfig, catalog: Catalog) -> None:
        super().__init__(ansi_color=True)
        self.cfg = cfg
        self.catalog = catalog
        self.session = FilterSession(catalog)
        self.tui_layout_mode = "normal"
        self.tui_density = cfg.tui.density

    def on_mount(self) -> None:
        apply_theme(self)
        self._refresh_layout_mode()
        self.push_screen(BrowseScreen())

    def on_resize(self, event) -> None:
        self._refresh_layout_mode()

    def _refresh_layout_mode(self) -> None:
        width = int(getattr(self.size, "width", 0) or 0)
        height = int(getattr(self.size, "height", 0) or 0)
        self.tui_layout_mode = resolve_layout_mode(width, height, self.cfg.tui.layout)
        sync_layout_classes(self, self.tui_layout_mode, self.tui_density)
        for screen in tuple(self.screen_stack):
            sync_layout_classes(screen, self.tui_layout_mode, self.tui_density)
