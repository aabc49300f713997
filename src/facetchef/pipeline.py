from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .domain import FacetType, Recipe, Tag
from .facets import FacetSnapshot, compute_facets, is_compatible
from .logging_utils import get_logger
from .search import has_query, search
from .tags import EMPTY_TAGS, TagSet, make_tag

log = get_logger(__name__)


@dataclass(frozen=True)
class FilterResult:
    recipes: tuple[Recipe, ...]
    facets: FacetSnapshot
    tags: TagSet
    pruned: tuple[Tag, ...] = ()
    query: str = ""

    @property
    def has_criteria(self) -> bool:
        return has_query(self.query) or bool(self.tags)

    @property
    def show_results(self) -> bool:
        return self.has_criteria

    @property
    def show_empty_state(self) -> bool:
        return self.has_criteria and not self.recipes


def run(catalog: Sequence[Recipe], query: str | None, tag_set: TagSet | Iterable[Tag] = EMPTY_TAGS) -> FilterResult:
    """Run one query + tag filtering pass over ``catalog``.

    Stale tags are pruned against the text-filtered subset only, before the
    tags themselves narrow the result. Swapping those two steps would let a
    tag invalidate itself.
    """
    if not isinstance(tag_set, TagSet):
        tag_set = TagSet.of(tag_set)
    query = query or ""

    search_filtered = search(catalog, query)
    validity = compute_facets(search_filtered)

    kept = tag_set.keep(lambda tag: tag.value in validity[tag.facet_type])
    pruned = tuple(tag for tag in tag_set if tag not in kept)
    if pruned:
        log.info("pruned tags no longer matching %r: %s", query, ", ".join(t.display() for t in pruned))

    final = tuple(recipe for recipe in search_filtered if all(is_compatible(recipe, tag) for tag in kept))
    log.debug(
        "query=%r tags=%d searched=%d final=%d",
        query,
        len(kept),
        len(search_filtered),
        len(final),
    )
    return FilterResult(
        recipes=final,
        facets=compute_facets(final),
        tags=kept,
        pruned=pruned,
        query=query,
    )


class FilterSession:
    """Single-actor holder of the query and selection, re-running on change."""

    def __init__(self, catalog: Sequence[Recipe], query: str = "", tags: TagSet = EMPTY_TAGS) -> None:
        self.catalog = catalog
        self.query = query
        self.tags = tags
        self.result = self._run()

    def set_query(self, query: str | None) -> FilterResult:
        self.query = query or ""
        return self._run()

    def add_tag(self, facet_type: FacetType | str, value: str) -> FilterResult:
        tag = make_tag(facet_type, value)
        if tag in self.tags:
            return self.result
        self.tags = self.tags.add(tag)
        return self._run()

    def remove_tag(self, facet_type: FacetType | str, value: str) -> FilterResult:
        tag = make_tag(facet_type, value)
        if tag not in self.tags:
            return self.result
        self.tags = self.tags.remove(tag)
        return self._run()

    def _run(self) -> FilterResult:
        self.result = run(self.catalog, self.query, self.tags)
        self.tags = self.result.tags
        return self.result
