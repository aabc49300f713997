from __future__ import annotations

from ..catalog import load_catalog_file
from ..config import EffectiveConfig
from .app import FacetchefApp


def run_tui(cfg: EffectiveConfig) -> int:
    catalog = load_catalog_file(cfg.require_catalog())
    app = FacetchefApp(cfg, catalog)
    app.run()
    return 0


__all__ = ["run_tui", "FacetchefApp"]
