"""Hacker News provider: scrapes item pages into flat comment lists."""

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from loguru import logger

from discussion_threads.config import HN_INDENT_WIDTH, HN_ITEM_URL
from discussion_threads.core.render.text import pluralize
from discussion_threads.errors import ItemIdNotFoundError, MalformedItemIdError, ParseFailedError
from discussion_threads.models.thread import Comment, Thread
from discussion_threads.protocols import FetcherProtocol
from discussion_threads.providers.common import inner_html, text_of

_URL_ID_PATTERN = re.compile(r"[?&]id=([^&#\s]*)")
_CONTENT_ID_PATTERN = re.compile(r"https?://news\.ycombinator\.com/item\?id=([^&#\s\"'<>]*)")
_POINTS_PATTERN = re.compile(r"(\d+)\s+point")


def _to_item_id(token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MalformedItemIdError("Hacker News", token)
    return int(token)


class HackerNewsProvider:
    """Hacker News discussion source.

    Item pages list every comment as a table row; nesting is only visible
    through the row's indentation, so comments come out in flat shape with
    ``depth`` set and no children.
    """

    name = "Hacker News"
    theme = "hn"

    def __init__(self, fetcher: FetcherProtocol) -> None:
        self._fetcher = fetcher

    def is_match(self, url: str) -> bool:
        return "ycombinator.com" in url

    def extract_id(self, url: str) -> int:
        """Item id from a URL such as ``https://news.ycombinator.com/item?id=123``."""
        m = _URL_ID_PATTERN.search(url)
        if m is None:
            raise ItemIdNotFoundError(self.name, url)
        return _to_item_id(m.group(1))

    def extract_id_from_content(self, content: str) -> int:
        """Item id from the first discussion link embedded in ``content``."""
        m = _CONTENT_ID_PATTERN.search(content)
        if m is None:
            raise ItemIdNotFoundError(self.name, content)
        return _to_item_id(m.group(1))

    def fetch_thread(self, item_id: int) -> Thread:
        url = HN_ITEM_URL.format(item_id)
        thread = parse_thread(self._fetcher.fetch(url), url=url)
        logger.info("Parsed {} from {}", pluralize(len(thread.comments), "comment"), url)
        return thread


def parse_thread(html: str, *, url: str) -> Thread:
    """Parse a Hacker News item page.

    Args:
        html: Page body.
        url: The page URL, used to resolve relative story links.

    Returns:
        Thread with comments in flat shape.

    Raises:
        ParseFailedError: If the page has no story row.
    """
    soup = BeautifulSoup(html, "html.parser")
    story = soup.select_one("tr.athing:not(.comtr)")
    if story is None:
        raise ParseFailedError(url, "no story row found")

    title_link = story.select_one(".titleline > a") or story.select_one("a.storylink")
    title = text_of(title_link)
    story_url = ""
    if title_link is not None:
        href = title_link.get("href")
        if isinstance(href, str):
            story_url = urljoin(url, href)

    points: int | None = None
    author = time = ""
    subtext = soup.select_one(".subtext")
    if subtext is not None:
        m = _POINTS_PATTERN.search(text_of(subtext.select_one(".score")))
        if m:
            points = int(m.group(1))
        author = text_of(subtext.select_one(".hnuser"))
        time = text_of(subtext.select_one(".age"))

    comments = []
    for row in soup.select("tr.athing.comtr"):
        comment = _parse_comment(row)
        if comment is not None:
            comments.append(comment)

    return Thread(
        title=title,
        url=story_url,
        source="hn",
        author=author,
        time=time,
        content=inner_html(soup.select_one(".toptext")),
        points=points,
        discussion_url=url,
        comments=tuple(comments),
    )


def _comment_depth(row: Tag) -> int:
    ind = row.select_one("td.ind")
    if ind is None:
        return 0
    indent = ind.get("indent")
    if isinstance(indent, str) and indent.isdigit():
        return int(indent)
    # Older markup: a spacer image whose width grows by HN_INDENT_WIDTH per level.
    img = ind.select_one("img")
    width = img.get("width") if img is not None else None
    if isinstance(width, str) and width.isdigit():
        return int(width) // HN_INDENT_WIDTH
    return 0


def _parse_comment(row: Tag) -> Comment | None:
    comment_id = row.get("id")
    if not isinstance(comment_id, str) or not comment_id:
        return None

    author = text_of(row.select_one(".hnuser"))
    content = inner_html(row.select_one(".commtext"))
    # Deleted and dead comments have neither.
    if not content or not author:
        logger.debug("Skipping comment {} without author or content", comment_id)
        return None

    return Comment(
        id=comment_id,
        author=author,
        content=content,
        time=text_of(row.select_one(".age")),
        depth=_comment_depth(row),
    )
