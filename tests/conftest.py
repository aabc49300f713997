from __future__ import annotations

import json
import logging
from pathlib import Path
import sys
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from facetchef.catalog import Catalog, load_catalog  # noqa: E402

SAMPLE_RECORDS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Tarte aux pommes",
        "servings": 6,
        "time": 50,
        "description": "Étaler la pâte dans le moule. Disposer les fruits coupés en lamelles et cuire 30 minutes.",
        "appliance": "Four",
        "ustensils": ["moule", "Rouleau à pâtisserie"],
        "ingredients": [
            {"ingredient": "Pomme", "quantity": 3},
            {"ingredient": "Farine", "quantity": 250, "unit": "grammes"},
            {"ingredient": "Beurre", "quantity": 100, "unit": "grammes"},
        ],
    },
    {
        "id": 2,
        "name": "Soupe de poisson",
        "servings": 4,
        "time": 40,
        "description": "Faire revenir l'oignon, ajouter le poisson et les tomates. Mixer et servir chaud.",
        "appliance": "Casserole",
        "ustensils": ["louche"],
        "ingredients": [
            {"ingredient": "Poisson", "quantity": 500, "unit": "grammes"},
            {"ingredient": "Tomate", "quantity": 2},
            {"ingredient": "Oignon", "quantity": 1},
        ],
    },
    {
        "id": 3,
        "name": "Crêpes",
        "servings": 8,
        "time": 20,
        "description": "Mélanger la farine, le lait et les oeufs. Laisser reposer une heure puis cuire dans la poêle.",
        "appliance": "Poêle",
        "ustensils": ["Saladier", "Louche", "louche"],
        "ingredients": [
            {"ingredient": "Farine", "quantity": 300, "unit": "grammes"},
            {"ingredient": "Lait", "quantity": 60, "unit": "cl"},
            {"ingredient": "Oeuf", "quantity": 3},
            {"ingredient": "Beurre"},
        ],
    },
    {
        "id": 4,
        "name": "Salade de tomates",
        "servings": 2,
        "time": 10,
        "description": "Couper les tomates en rondelles et arroser d'huile.",
        "appliance": "Saladier",
        "ustensils": ["couteau"],
        "ingredients": [
            {"ingredient": "Tomate", "quantity": 4},
            {"ingredient": "Huile d'olive", "quantity": 2, "unit": "cuillères à soupe"},
        ],
    },
]


@pytest.fixture(autouse=True)
def reset_package_logger():
    logger = logging.getLogger("facetchef")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture()
def sample_records() -> list[dict[str, Any]]:
    return json.loads(json.dumps(SAMPLE_RECORDS))


@pytest.fixture()
def catalog(sample_records: list[dict[str, Any]]) -> Catalog:
    return load_catalog(sample_records)


@pytest.fixture()
def catalog_file(tmp_path: Path, sample_records: list[dict[str, Any]]) -> Path:
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(sample_records, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
