from __future__ import annotations

from collections.abc import Iterable

from ..textual import Label, ListItem, ListView


async def replace_items(list_view: ListView, items: Iterable[ListItem], empty_text: str | None = None) -> None:
    if list_view.children:
        await list_view.clear()
    items = list(items)
    if not items and empty_text:
        items = [ListItem(Label(empty_text))]
    if items:
        await list_view.extend(items)
