from __future__ import annotations

from .textual import Theme

TUI_THEME_NAME = "facetchef-ansi"

APP_CSS = """
Screen {
    background: $background;
    color: $text;
    padding: 0;
}

Header, Footer {
    background: $panel;
    color: $text;
}

.screen-shell {
    width: 1fr;
    height: 1fr;
    align: center top;
    padding: 1 2;
}

.layout-wide .screen-shell {
    padding: 1 4;
}

.layout-compact .screen-shell {
    padding: 0 1;
}

.screen-card {
    width: 1fr;
    height: 1fr;
    border: round $panel;
    background: $surface;
    padding: 1 2;
}

.layout-compact .screen-card,
.density-compact .screen-card {
    padding: 0 1;
}

#search-input {
    margin: 0 0 1 0;
    background: $surface;
    border: round $panel;
    color: $text;
}

#tag-list {
    height: auto;
    max-height: 5;
    border: round $panel;
}

#facet-lists {
    height: 14;
}

.layout-compact #facet-lists {
    layout: vertical;
    height: auto;
}

.facet-panel {
    width: 1fr;
    height: 1fr;
    margin: 0 1 0 0;
}

.layout-compact .facet-panel {
    height: 10;
    margin: 0;
}

.facet-title {
    text-style: bold;
}

.facet-title.chip-primary {
    color: $primary;
}

.facet-title.chip-success {
    color: $success;
}

.facet-title.chip-danger {
    color: $error;
}

.facet-filter {
    border: round $panel;
}

.facet-options,
#recipe-list {
    height: 1fr;
    border: round $panel;
    background: $surface;
}

.facet-options:focus,
#recipe-list:focus,
#tag-list:focus {
    border: round $primary;
}

ListItem.chip-primary Label {
    color: $primary;
}

ListItem.chip-success Label {
    color: $success;
}

ListItem.chip-danger Label {
    color: $error;
}

ListView:focus > ListItem.-highlight {
    background: ansi_bright_yellow;
    color: ansi_black;
    text-style: bold;
}

#detail {
    height: auto;
    max-height: 12;
    padding: 1 0 0 0;
}

#status {
    height: auto;
    padding: 1 0 0 0;
    color: $text-muted;
}

.is-hidden {
    display: none;
}
"""

TUI_THEMES = {
    TUI_THEME_NAME: Theme(
        name=TUI_THEME_NAME,
        primary="ansi_bright_cyan",
        secondary="ansi_bright_blue",
        accent="ansi_bright_yellow",
        warning="ansi_bright_yellow",
        error="ansi_bright_red",
        success="ansi_bright_green",
        foreground="ansi_default",
        background="ansi_default",
        surface="ansi_default",
        panel="ansi_bright_black",
        dark=False,
        variables={
            "text": "ansi_default",
            "text-muted": "ansi_bright_black",
        },
    )
}
