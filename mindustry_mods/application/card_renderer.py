"""HTML rendering of mod cards and the listing page."""

import html
from typing import Iterable, Optional

from mindustry_mods.domain.mod import Mod

RAW_CONTENT_BASE = "https://raw.githubusercontent.com"
DEFAULT_BRANCH = "master"
PLACEHOLDER_ICON = "../images/nothing.png"
NOISE_TAG = "content"
MAX_STARS = 2**32 - 1


def _esc(value) -> str:
    return html.escape(str(value), quote=True)


def icon_url(mod: Mod) -> Optional[str]:
    """Raw image URL of the mod icon, or None when the mod has no icon."""
    if not mod.icon_raw:
        return None
    return f"{RAW_CONTENT_BASE}/{mod.repo}/{DEFAULT_BRANCH}/{mod.icon_raw}"


def archive_url(mod: Mod) -> str:
    return f"https://github.com/{mod.repo}/archive/{DEFAULT_BRANCH}.zip"


def visible_tags(tags: Iterable[str]) -> list:
    return [tag for tag in tags if tag != NOISE_TAG]


def render_tag_list(tags: Iterable[str]) -> str:
    tags = visible_tags(tags)
    if not tags:
        return "<div></div>"
    items = "".join(f'<li class="{_esc(tag)}">{_esc(tag)}</li>' for tag in tags)
    return f"<ul>{items}</ul>"


def render_stars(stars) -> str:
    """One star glyph per star, a hollow star for zero, 'err' for a non-count."""
    if isinstance(stars, bool) or not isinstance(stars, int) or not 0 <= stars <= MAX_STARS:
        return "<div>err</div>"
    if stars == 0:
        return '<div class="zero-star">☆</div>'
    return '<div class="star">★</div>' * stars


def render_icon(mod: Mod) -> str:
    href = _esc(mod.endpoint_href)
    url = icon_url(mod)
    if url is None:
        return f'<a href="{href}"><img src="{PLACEHOLDER_ICON}"></a>'
    return (
        f'<a href="{href}"><img src="{_esc(url)}" '
        f'onerror="this.src=&#x27;{PLACEHOLDER_ICON}&#x27;"></a>'
    )


def render_wiki_link(mod: Mod) -> str:
    if mod.wiki:
        return f'<a href="{_esc(mod.wiki)}">wiki</a>'
    return '<a style="display: none"></a>'


def render_links(mod: Mod) -> str:
    return (
        f'<a href="{_esc(mod.link)}">repository</a>'
        f'<a href="{_esc(archive_url(mod))}">zip</a>'
        f"{render_wiki_link(mod)}"
    )


def render_card(mod: Mod) -> str:
    """Render one listing card for a mod."""
    title = f'<a href="{_esc(mod.endpoint_href)}">{_esc(mod.display_name)}</a>'
    committed = mod.committed_at.strftime("%Y-%m-%d %H:%M UTC")
    last_commit = f'<span title="{committed}">{_esc(mod.delta_ago)} ago</span>'
    return (
        '<div class="outside"><div class="wrapper">'
        f'<div class="box icon">{render_icon(mod)}</div>'
        f'<div class="box name">{title}{last_commit}</div>'
        f'<div class="box desc"><p class="description">{_esc(mod.desc)}</p></div>'
        f'<div class="box links">{render_links(mod)}</div>'
        f'<div class="box stars">{render_stars(mod.stars)}</div>'
        f'<div class="box assets">{render_tag_list(mod.assets)}</div>'
        f'<div class="box contents">{render_tag_list(mod.contents)}</div>'
        "</div></div>"
    )


PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Mindustry Mods</title>
<link rel="StyleSheet" href="css/listing.css">
</head>
<body>
<div class="app">
<header><h1>Mindustry Mods</h1></header>
<button>stars</button>
<div class="listing-container">
{body}
</div>
</div>
</body>
</html>
"""


def render_listing(state) -> str:
    """Render the full listing page for a ViewState."""
    cards = [render_card(mod) for mod in state.mods]
    if state.error is not None:
        cards.insert(0, f'<p class="error">Failed to load mods: {_esc(state.error)}</p>')
    body = "\n".join(cards)
    return PAGE_TEMPLATE.format(body=body)
