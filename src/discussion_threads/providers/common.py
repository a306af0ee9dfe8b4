"""Helpers shared by the HTML scraping providers."""

from bs4 import Tag


def inner_html(tag: Tag | None) -> str:
    """Markup inside ``tag`` (without the tag itself), stripped."""
    if tag is None:
        return ""
    return "".join(str(child) for child in tag.contents).strip()


def text_of(tag: Tag | None) -> str:
    if tag is None:
        return ""
    return tag.get_text(strip=True)


def time_text(tag: Tag | None) -> str:
    """Display time for a ``<time>`` element: title, then datetime, then its text."""
    if tag is None:
        return ""
    for attr in ("title", "datetime"):
        value = tag.get(attr)
        if isinstance(value, str) and value:
            return value
    return text_of(tag)
