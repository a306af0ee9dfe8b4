"""Lobsters provider: scrapes story pages into nested comment trees."""

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from loguru import logger

from discussion_threads.config import LOBSTERS_STORY_URL
from discussion_threads.core.render.text import pluralize
from discussion_threads.errors import ItemIdNotFoundError, MalformedItemIdError, ParseFailedError
from discussion_threads.models.thread import Comment, Thread
from discussion_threads.protocols import FetcherProtocol
from discussion_threads.providers.common import inner_html, text_of, time_text

_STORY_URL_PATTERN = re.compile(r"^https?://lobste\.rs/s/[a-z0-9]+")
_URL_ID_PATTERN = re.compile(r"lobste\.rs/s/([^/?#\s]*)")
_CONTENT_ID_PATTERN = re.compile(r"https?://lobste\.rs/s/([^/?#\s\"'<>]*)")
_SHORT_ID_PATTERN = re.compile(r"[a-z0-9]+")


def _to_short_id(token: str) -> str:
    if not _SHORT_ID_PATTERN.fullmatch(token):
        raise MalformedItemIdError("Lobsters", token)
    return token


class LobstersProvider:
    """Lobsters discussion source.

    Story pages nest replies in ``ol.comments`` lists, so comments come out
    in nested shape. Comment ids are the site's own short ids.
    """

    name = "Lobsters"
    theme = "lobsters"

    def __init__(self, fetcher: FetcherProtocol) -> None:
        self._fetcher = fetcher

    def is_match(self, url: str) -> bool:
        return _STORY_URL_PATTERN.match(url) is not None

    def extract_id(self, url: str) -> str:
        m = _URL_ID_PATTERN.search(url)
        if m is None:
            raise ItemIdNotFoundError(self.name, url)
        return _to_short_id(m.group(1))

    def extract_id_from_content(self, content: str) -> str:
        m = _CONTENT_ID_PATTERN.search(content)
        if m is None:
            raise ItemIdNotFoundError(self.name, content)
        return _to_short_id(m.group(1))

    def fetch_thread(self, item_id: str) -> Thread:
        url = LOBSTERS_STORY_URL.format(item_id)
        thread = parse_thread(self._fetcher.fetch(url), url=url)
        logger.info(
            "Parsed {} from {}", pluralize(len(thread.comments), "top-level comment"), url
        )
        return thread


def parse_thread(html: str, *, url: str) -> Thread:
    """Parse a Lobsters story page.

    Raises:
        ParseFailedError: If the page has no story element.
    """
    soup = BeautifulSoup(html, "html.parser")
    story = soup.select_one("li.story")
    if story is None:
        raise ParseFailedError(url, "no story element found")

    title_link = story.select_one(".link a")
    story_url = url
    if title_link is not None:
        href = title_link.get("href")
        if isinstance(href, str) and href:
            story_url = urljoin(url, href)

    return Thread(
        title=text_of(title_link),
        url=story_url,
        source="lobsters",
        author=text_of(story.select_one(".byline .u-author")),
        time=time_text(story.select_one(".byline time")),
        content=inner_html(soup.select_one(".story_content .story_text")),
        discussion_url=url,
        comments=_parse_comments(soup),
    )


def _comments_container(soup: BeautifulSoup) -> Tag | None:
    container = soup.select_one("li#story_comments ol.comments")
    if container is None:
        container = soup.select_one("ol.comments")
    return container


def _parse_comments(soup: BeautifulSoup) -> tuple[Comment, ...]:
    container = _comments_container(soup)
    if container is None:
        return ()

    comments = []
    for item in container.find_all("li", class_="comments_subtree", recursive=False):
        comment = _parse_comment(item, 0)
        if comment is not None:
            comments.append(comment)
    return tuple(comments)


def _comment_author(details: Tag) -> str:
    """Name from the last profile link that is not the avatar link."""
    author = ""
    for link in details.select("div.byline a[href^='/~']"):
        if link.find("img") is None:
            author = text_of(link)
    return author


def _parse_comment(item: Tag, depth: int) -> Comment | None:
    comment_div = item.select_one("div[data-shortid]")
    if comment_div is None or "comment_form_container" in (comment_div.get("class") or []):
        return None
    # A subtree without its own comment would otherwise pick up a reply's div.
    if comment_div.find_parent("li", class_="comments_subtree") is not item:
        return None
    short_id = comment_div.get("data-shortid")
    if not isinstance(short_id, str) or not short_id:
        return None

    details = comment_div.select_one("div.details") or comment_div
    children = []
    for replies in item.find_all("ol", class_="comments", recursive=False):
        for reply_item in replies.find_all("li", class_="comments_subtree", recursive=False):
            reply = _parse_comment(reply_item, depth + 1)
            if reply is None:
                continue
            if reply.id == short_id:
                logger.debug("Skipping reply that repeats its parent id {}", short_id)
                continue
            children.append(reply)

    return Comment(
        id=short_id,
        author=_comment_author(details),
        content=inner_html(details.select_one("div.comment_text")),
        time=time_text(details.select_one("div.byline time")),
        depth=depth,
        children=tuple(children),
    )
