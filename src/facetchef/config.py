from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .domain import DESCRIPTION_LIMIT
from .errors import ConfigError


@dataclass(frozen=True)
class TuiConfig:
    header_icon: str = "🍲"
    layout: str = "auto"
    density: str = "cozy"


@dataclass(frozen=True)
class EffectiveConfig:
    catalog_path: Optional[str]
    description_limit: int
    log_level: str
    default_project: Optional[str]
    tui: TuiConfig
    project_dir: str

    def require_catalog(self) -> Path:
        if not self.catalog_path:
            raise ConfigError("catalog_path is required (set in config or via --catalog)")
        path = Path(os.path.expanduser(self.catalog_path))
        if not path.is_absolute():
            path = Path(self.project_dir) / path
        return path


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/facetchef"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_profile(profile: str) -> Optional[str]:
    path = _config_root() / "projects.d" / f"{profile}.toml"
    if not path.exists():
        return None
    data = _load_toml(path)
    project = data.get("project")
    if not project:
        raise ConfigError(f"Profile {profile!r} missing 'project' key")
    return str(project)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "facetchef.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    profile = cli_args.get("profile")
    project_dir = cli_args.get("project")
    if not project_dir and profile:
        project_dir = load_profile(profile)
    if not project_dir:
        project_dir = global_cfg.get("default_project") or os.getcwd()

    project_cfg = load_project_config(project_dir)
    merged = merge_config(_cli_to_dict(cli_args), project_cfg, global_cfg)

    catalog_path = merged.get("catalog_path")
    return EffectiveConfig(
        catalog_path=str(catalog_path) if catalog_path else None,
        description_limit=_normalize_description_limit(merged.get("description_limit", DESCRIPTION_LIMIT)),
        log_level=_normalize_log_level(merged.get("log_level", "WARNING")),
        default_project=merged.get("default_project"),
        tui=TuiConfig(
            header_icon=str(merged.get("tui_header_icon", "🍲")),
            layout=_normalize_tui_layout(merged.get("tui_layout", "auto")),
            density=_normalize_tui_density(merged.get("tui_density", "cozy")),
        ),
        project_dir=str(project_dir),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in (
        "catalog_path",
        "description_limit",
        "log_level",
        "default_project",
        "tui_header_icon",
        "tui_layout",
        "tui_density",
    ):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]
    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = []
    if cfg.catalog_path:
        lines.append(f"catalog_path = {cfg.catalog_path!r}")
    if cfg.default_project:
        lines.append(f"default_project = {cfg.default_project!r}")
    lines.append(f"description_limit = {cfg.description_limit!r}")
    lines.append(f"log_level = {cfg.log_level!r}")
    lines.append(f"tui_header_icon = {cfg.tui.header_icon!r}")
    lines.append(f"tui_layout = {cfg.tui.layout!r}")
    lines.append(f"tui_density = {cfg.tui.density!r}")
    return "\n".join(lines) + "\n"


def _normalize_description_limit(value: Any) -> int:
    try:
        limit = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"description_limit must be an integer, got {value!r}") from exc
    if limit < 2:
        raise ConfigError(f"description_limit must be at least 2, got {limit}")
    return limit


def _normalize_log_level(value: Any) -> str:
    text = str(value or "").strip().upper()
    if text in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return text
    return "WARNING"


def _normalize_tui_layout(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in {"auto", "compact", "normal", "wide"}:
        return text
    return "auto"


def _normalize_tui_density(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in {"cozy", "compact"}:
        return text
    return "cozy"
