from __future__ import annotations

import logging

from facetchef.catalog import load_catalog
from facetchef.domain import FacetType, Tag
from facetchef.facets import is_compatible, recipe_facet_values
from facetchef.pipeline import FilterSession, run
from facetchef.tags import EMPTY_TAGS, TagSet, add_tag, make_tag
from tests.utils import by_title, titles

SCENARIO = [
    {
        "id": 1,
        "name": "Tarte aux pommes",
        "servings": 4,
        "time": 45,
        "description": "",
        "appliance": "four",
        "ustensils": ["moule"],
        "ingredients": [{"ingredient": "Pomme"}, {"ingredient": "Farine"}],
    },
    {
        "id": 2,
        "name": "Soupe de poisson",
        "servings": 4,
        "time": 30,
        "description": "",
        "appliance": "casserole",
        "ustensils": ["louche"],
        "ingredients": [{"ingredient": "Poisson"}],
    },
]


# Purpose: verify no criteria returns the whole catalog and signals it.
def test_run_without_criteria() -> None:
    catalog = load_catalog(SCENARIO)
    result = run(catalog, "", EMPTY_TAGS)
    assert titles(result.recipes) == ["Tarte aux pommes", "Soupe de poisson"]
    assert result.has_criteria is False
    assert result.show_results is False
    assert result.show_empty_state is False


# Purpose: verify a text query matching an ingredient narrows the result.
def test_run_query_matches_ingredient() -> None:
    catalog = load_catalog(SCENARIO)
    result = run(catalog, "pomme", EMPTY_TAGS)
    assert titles(result.recipes) == ["Tarte aux pommes"]
    assert result.has_criteria is True
    assert result.facets[FacetType.INGREDIENTS] == ("pomme", "farine")


# Purpose: verify a tag absent from the text-filtered subset is pruned.
def test_run_prunes_tag_outside_search() -> None:
    catalog = load_catalog(SCENARIO)
    tags = add_tag(EMPTY_TAGS, "ingredients", "poisson")
    result = run(catalog, "pomme", tags)
    assert list(result.tags) == []
    assert result.pruned == (make_tag("ingredients", "poisson"),)
    assert titles(result.recipes) == ["Tarte aux pommes"]


# Purpose: verify a tag is kept when the query alone still allows it, even with zero results.
def test_run_keeps_tag_valid_for_search(catalog) -> None:
    tags = TagSet.of([make_tag("ingredients", "poisson"), make_tag("appliances", "saladier")])
    result = run(catalog, "tomate", tags)
    assert result.recipes == ()
    assert result.tags == tags
    assert result.pruned == ()
    assert result.show_empty_state is True


# Purpose: verify tags never prune each other without a query.
def test_run_tags_do_not_invalidate_each_other(catalog) -> None:
    tags = TagSet.of([make_tag("appliances", "four"), make_tag("appliances", "casserole")])
    result = run(catalog, "", tags)
    assert result.recipes == ()
    assert len(result.tags) == 2
    assert result.has_criteria is True


# Purpose: verify a recipe must satisfy every tag across facet types.
def test_run_and_across_types(catalog) -> None:
    tags = TagSet.of([make_tag("ingredients", "farine"), make_tag("utensils", "louche")])
    assert titles(run(catalog, "", tags).recipes) == ["Crêpes"]


# Purpose: verify repeated tags of one type are also combined with AND.
def test_run_and_within_type(catalog) -> None:
    farine = add_tag(EMPTY_TAGS, "ingredients", "farine")
    assert titles(run(catalog, "", farine).recipes) == ["Tarte aux pommes", "Crêpes"]
    both = add_tag(farine, "ingredients", "lait")
    assert titles(run(catalog, "", both).recipes) == ["Crêpes"]


# Purpose: verify short queries combine with tags as if absent.
def test_run_short_query_with_tags(catalog) -> None:
    tags = add_tag(EMPTY_TAGS, "ingredients", "tomate")
    result = run(catalog, "po", tags)
    assert titles(result.recipes) == ["Soupe de poisson", "Salade de tomates"]
    assert result.tags == tags


# Purpose: verify identical inputs give identical results.
def test_run_is_idempotent(catalog) -> None:
    tags = TagSet.of([make_tag("ingredients", "farine")])
    assert run(catalog, "cuire", tags) == run(catalog, "cuire", tags)


# Purpose: verify display facets come exactly from the final recipes.
def test_run_display_facets_consistent(catalog) -> None:
    tags = TagSet.of([make_tag("utensils", "louche")])
    result = run(catalog, "", tags)
    for facet_type in FacetType:
        contributed = {v for recipe in result.recipes for v in recipe_facet_values(recipe, facet_type)}
        assert set(result.facets[facet_type]) == contributed


# Purpose: verify plain iterables of tags are accepted.
def test_run_accepts_tag_list(catalog) -> None:
    result = run(catalog, None, [make_tag("appliances", "four"), make_tag("appliances", "four")])
    assert titles(result.recipes) == ["Tarte aux pommes"]
    assert len(result.tags) == 1


# Purpose: verify pruning is logged.
def test_run_logs_pruned_tags(catalog, caplog) -> None:
    caplog.set_level(logging.INFO, logger="facetchef")
    run(catalog, "crêpes", TagSet.of([make_tag("ingredients", "poisson")]))
    assert "ingredients: poisson" in caplog.text


# Purpose: verify a session keeps its selection in sync with pruning.
def test_session_flow(catalog) -> None:
    session = FilterSession(catalog)
    assert session.result.has_criteria is False

    result = session.add_tag("ingredients", "Poisson")
    assert titles(result.recipes) == ["Soupe de poisson"]

    again = session.add_tag("ingredients", "poisson")
    assert again is result

    result = session.set_query("pomme")
    assert titles(result.recipes) == ["Tarte aux pommes"]
    assert not session.tags

    result = session.set_query("")
    assert result.has_criteria is False
    assert session.remove_tag("ingredients", "poisson") is result


# Purpose: verify removing a tag re-runs the pipeline.
def test_session_remove_tag(catalog) -> None:
    session = FilterSession(catalog)
    session.add_tag("utensils", "louche")
    session.add_tag("appliances", "poêle")
    assert titles(session.result.recipes) == ["Crêpes"]
    result = session.remove_tag("appliances", "poêle")
    assert titles(result.recipes) == ["Soupe de poisson", "Crêpes"]


# Purpose: verify tags built directly from plain strings filter like parsed ones.
def test_run_with_plain_string_tag(catalog) -> None:
    tag = Tag("ingredients", "farine")
    assert tag.facet_type is FacetType.INGREDIENTS
    assert is_compatible(by_title(catalog, "Crêpes"), tag)
    result = run(catalog, "", [tag])
    assert titles(result.recipes) == ["Tarte aux pommes", "Crêpes"]
    assert list(result.tags) == [make_tag("ingredients", "farine")]


# Purpose: verify a duplicated tag comes back once in the result.
def test_run_returns_duplicate_tag_once(catalog) -> None:
    four = make_tag("appliances", "four")
    result = run(catalog, "", TagSet((four, four)))
    assert list(result.tags) == [four]
