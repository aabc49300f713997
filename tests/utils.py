from __future__ import annotations

from pathlib import Path

from facetchef.catalog import Catalog


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "facetchef"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_profile(home: Path, name: str, project: str) -> Path:
    dir_path = home / ".config" / "facetchef" / "projects.d"
    dir_path.mkdir(parents=True, exist_ok=True)
    path = dir_path / f"{name}.toml"
    path.write_text(f"project = {project!r}\n", encoding="utf-8")
    return path


def titles(recipes) -> list[str]:
    return [recipe.title for recipe in recipes]


def by_title(catalog: Catalog, title: str):
    for recipe in catalog:
        if recipe.title == title:
            return recipe
    raise KeyError(title)
