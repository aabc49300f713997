from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from typing import Any

from .cards import format_recipe_card
from .catalog import Catalog, load_catalog_file
from .config import EffectiveConfig, config_to_toml, resolve_config
from .domain import FacetType
from .errors import CatalogError, ConfigError, FacetchefError, MissingFileError
from .facets import facet_options, snapshot_to_dict
from .logging_utils import init_logging
from .pipeline import FilterResult, run
from .tags import EMPTY_TAGS, TagSet, add_tag


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.tui or not args.command:
        return _cmd_tui(args)

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "search": _cmd_search,
        "facets": _cmd_facets,
        "show": _cmd_show,
        "config": _cmd_config,
    }

    handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except FacetchefError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _common_options(suppress: bool) -> argparse.ArgumentParser:
    # subcommand copies must not overwrite options given before the subcommand
    default = argparse.SUPPRESS if suppress else None
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--catalog", dest="catalog_path", default=default)
    common.add_argument("--project", default=default)
    common.add_argument("--profile", default=default)
    common.add_argument("--description-limit", type=int, default=default)
    common.add_argument("--log-level", default=default)
    common.add_argument("--verbose", action="store_true", default=argparse.SUPPRESS if suppress else False)
    common.add_argument("--tui-header-icon", default=default)
    common.add_argument("--tui-layout", default=default)
    common.add_argument("--tui-density", default=default)
    return common


def _build_parser() -> argparse.ArgumentParser:
    common = _common_options(suppress=True)

    criteria = argparse.ArgumentParser(add_help=False)
    criteria.add_argument("query", nargs="?", default="")
    criteria.add_argument("--ingredient", dest="ingredients", action="append", default=[])
    criteria.add_argument("--utensil", dest="utensils", action="append", default=[])
    criteria.add_argument("--appliance", dest="appliances", action="append", default=[])
    criteria.add_argument("--json", action="store_true")

    parser = argparse.ArgumentParser(prog="facetchef", parents=[_common_options(suppress=False)])
    parser.add_argument("--tui", action="store_true", help="Launch interactive TUI")
    sub = parser.add_subparsers(dest="command")

    search = sub.add_parser("search", parents=[common, criteria])
    search.add_argument("--all", action="store_true", help="List recipes even without criteria")

    facets = sub.add_parser("facets", parents=[common, criteria])
    facets.add_argument("--type", dest="facet_type", choices=[t.value for t in FacetType])
    facets.add_argument("--filter", dest="needle", default="")

    show = sub.add_parser("show", parents=[common])
    show.add_argument("recipe_id")

    sub.add_parser("config", parents=[common])

    return parser


def _cmd_search(args: argparse.Namespace) -> int:
    _, catalog = _load(args)
    result = run(catalog, args.query, _tags_from_args(args))
    _report_pruned(result)

    if args.json:
        print(json.dumps(_result_to_dict(result), indent=2, ensure_ascii=False))
        return 0

    if not result.has_criteria and not args.all:
        print("No active criteria.")
        return 0
    if result.show_empty_state:
        print("No recipes match.")
        return 0
    for recipe in result.recipes:
        print(f"{recipe.recipe_id}: {recipe.title} ({recipe.time} min)")
    return 0


def _cmd_facets(args: argparse.Namespace) -> int:
    _, catalog = _load(args)
    result = run(catalog, args.query, _tags_from_args(args))
    _report_pruned(result)

    types = [FacetType.parse(args.facet_type)] if args.facet_type else list(FacetType)
    options = {t.value: facet_options(result.facets, t, result.tags, args.needle) for t in types}

    if args.json:
        print(json.dumps(options, indent=2, ensure_ascii=False))
        return 0
    for name, values in options.items():
        print(f"{name}:")
        for value in values:
            print(f"  {value}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    cfg, catalog = _load(args)
    recipe = catalog.get(args.recipe_id)
    if recipe is None:
        raise CatalogError(f"No recipe with id {args.recipe_id!r}")
    print(format_recipe_card(recipe, cfg.description_limit))
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg))
    return 0


def _cmd_tui(args: argparse.Namespace) -> int:
    from .tui import run_tui

    cfg = _resolve_cfg(args)
    return run_tui(cfg)


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    cfg = resolve_config(_cli_args_dict(args))
    level = logging.DEBUG if getattr(args, "verbose", False) else cfg.log_level
    init_logging(level)
    return cfg


def _load(args: argparse.Namespace) -> tuple[EffectiveConfig, Catalog]:
    cfg = _resolve_cfg(args)
    return cfg, load_catalog_file(cfg.require_catalog())


def _tags_from_args(args: argparse.Namespace) -> TagSet:
    tags = EMPTY_TAGS
    for facet_type in FacetType:
        for value in getattr(args, facet_type.value, None) or []:
            tags = add_tag(tags, facet_type, value)
    return tags


def _report_pruned(result: FilterResult) -> None:
    for tag in result.pruned:
        print(f"Dropped tag {tag.display()} (no recipe matches the query)", file=sys.stderr)


def _result_to_dict(result: FilterResult) -> dict[str, Any]:
    return {
        "has_criteria": result.has_criteria,
        "recipes": [
            {
                "id": recipe.recipe_id,
                "name": recipe.title,
                "time": recipe.time,
                "servings": recipe.servings,
                "appliance": recipe.appliance,
            }
            for recipe in result.recipes
        ],
        "facets": snapshot_to_dict(result.facets),
        "tags": [{"type": tag.facet_type.value, "value": tag.value} for tag in result.tags],
        "pruned": [{"type": tag.facet_type.value, "value": tag.value} for tag in result.pruned],
    }


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: FacetchefError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, MissingFileError):
        return 3
    if isinstance(exc, CatalogError):
        return 4
    return 1
