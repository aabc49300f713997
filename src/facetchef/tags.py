from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .domain import FacetType, Tag, normalize_name


def make_tag(facet_type: FacetType | str, value: str) -> Tag:
    return Tag(facet_type=FacetType.parse(facet_type), value=normalize_name(value))


@dataclass(frozen=True)
class TagSet:
    """Ordered, duplicate-free selection of tags. Never mutated in place."""

    tags: tuple[Tag, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))

    @classmethod
    def of(cls, tags: Iterable[Tag]) -> "TagSet":
        return cls(tuple(tags))

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags

    def __bool__(self) -> bool:
        return bool(self.tags)

    def add(self, tag: Tag) -> "TagSet":
        if tag in self.tags:
            return self
        return TagSet(self.tags + (tag,))

    def remove(self, tag: Tag) -> "TagSet":
        if tag not in self.tags:
            return self
        return TagSet(tuple(t for t in self.tags if t != tag))

    def keep(self, predicate: Callable[[Tag], bool]) -> "TagSet":
        kept = tuple(tag for tag in self.tags if predicate(tag))
        if len(kept) == len(self.tags):
            return self
        return TagSet(kept)

    def of_type(self, facet_type: FacetType | str) -> tuple[Tag, ...]:
        facet_type = FacetType.parse(facet_type)
        return tuple(tag for tag in self.tags if tag.facet_type == facet_type)


EMPTY_TAGS = TagSet()


def add_tag(tag_set: TagSet, facet_type: FacetType | str, value: str) -> TagSet:
    return tag_set.add(make_tag(facet_type, value))


def remove_tag(tag_set: TagSet, facet_type: FacetType | str, value: str) -> TagSet:
    return tag_set.remove(make_tag(facet_type, value))
