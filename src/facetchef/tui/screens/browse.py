from __future__ import annotations

from ...cards import format_recipe_card
from ...domain import FacetType
from ...facets import facet_options
from ...pipeline import FilterResult
from ..common import apply_browse_sizes, header_icon, sync_screen_layout
from ..state import FACET_TITLES, STATUS_EMPTY, recipe_line, status_text, tag_chip
from ..textual import (
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Input,
    Label,
    ListItem,
    ListView,
    Screen,
    Static,
    Vertical,
)
from ..widgets.list_utils import replace_items


class BrowseScreen(Screen):
    BINDINGS = [("escape", "clear_search", "Clear search")]

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="browse-shell", classes="screen-shell"):
            with Vertical(id="browse-card", classes="screen-card"):
                yield Input(placeholder="Search recipes, ingredients, utensils…", id="search-input")
                yield ListView(id="tag-list")
                with Horizontal(id="facet-lists"):
                    for facet_type in FacetType:
                        with Vertical(classes="facet-panel"):
                            yield Label(
                                FACET_TITLES[facet_type],
                                classes=f"facet-title chip-{facet_type.style}",
                            )
                            yield Input(
                                placeholder="Filter…",
                                id=f"filter-{facet_type.value}",
                                classes="facet-filter",
                            )
                            yield ListView(id=f"options-{facet_type.value}", classes="facet-options")
                yield ListView(id="recipe-list")
                yield Static("", id="detail")
                yield Static("", id="status")
        yield Footer()

    async def on_mount(self) -> None:
        sync_screen_layout(self)
        apply_browse_sizes(self)
        await self._render(self.app.session.result)
        self.query_one("#search-input", Input).focus()

    def on_resize(self, event) -> None:
        sync_screen_layout(self)
        apply_browse_sizes(self)

    async def on_input_changed(self, event: Input.Changed) -> None:
        widget_id = event.input.id or ""
        if widget_id == "search-input":
            await self._render(self.app.session.set_query(event.value))
        elif widget_id.startswith("filter-"):
            facet_type = FacetType.parse(widget_id.removeprefix("filter-"))
            await self._render_options(self.app.session.result, facet_type)

    async def on_list_view_selected(self, event: ListView.Selected) -> None:
        list_id = event.list_view.id or ""
        session = self.app.session
        if list_id == "tag-list":
            tag = getattr(event.item, "facet_tag", None)
            if tag is not None:
                await self._render(session.remove_tag(tag.facet_type, tag.value))
        elif list_id.startswith("options-"):
            value = getattr(event.item, "facet_value", None)
            if value is not None:
                facet_type = FacetType.parse(list_id.removeprefix("options-"))
                self.query_one(f"#filter-{facet_type.value}", Input).value = ""
                await self._render(session.add_tag(facet_type, value))
        elif list_id == "recipe-list":
            recipe = getattr(event.item, "recipe", None)
            if recipe is not None:
                self._show_detail(recipe)

    def action_clear_search(self) -> None:
        self.query_one("#search-input", Input).value = ""

    async def _render(self, result: FilterResult) -> None:
        chips = []
        for tag in result.tags:
            item = ListItem(Label(tag_chip(tag)), classes=f"chip-{tag.facet_type.style}")
            item.facet_tag = tag
            chips.append(item)
        await replace_items(self.query_one("#tag-list", ListView), chips)

        for facet_type in FacetType:
            await self._render_options(result, facet_type)

        rows = []
        if result.show_results:
            for recipe in result.recipes:
                item = ListItem(Label(recipe_line(recipe)))
                item.recipe = recipe
                rows.append(item)
        empty = STATUS_EMPTY if result.show_empty_state else None
        await replace_items(self.query_one("#recipe-list", ListView), rows, empty)
        self.query_one("#detail", Static).update("")
        self.query_one("#status", Static).update(status_text(result))

    async def _render_options(self, result: FilterResult, facet_type: FacetType) -> None:
        needle = self.query_one(f"#filter-{facet_type.value}", Input).value
        items = []
        for value in facet_options(result.facets, facet_type, result.tags, needle):
            item = ListItem(Label(value))
            item.facet_value = value
            items.append(item)
        await replace_items(self.query_one(f"#options-{facet_type.value}", ListView), items)

    def _show_detail(self, recipe) -> None:
        text = format_recipe_card(recipe, self.app.cfg.description_limit)
        self.query_one("#detail", Static).update(text)
