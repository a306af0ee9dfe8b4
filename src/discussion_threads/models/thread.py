"""Domain models for discussion threads."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """A single comment, possibly with nested replies.

    ``depth`` is the nesting level relative to the thread root (0 = top-level).
    Flat-shape providers leave ``children`` empty and rely on ``depth``;
    nested-shape providers fill ``children`` directly.
    """

    id: str
    author: str
    content: str
    time: str = ""
    depth: int = 0
    children: tuple["Comment", ...] = ()


@dataclass(frozen=True)
class Thread:
    """A root post together with its comments."""

    title: str
    url: str
    source: str
    author: str = ""
    time: str = ""
    content: str = ""
    points: int | None = None
    discussion_url: str = ""
    comments: tuple[Comment, ...] = ()


def count_all_comments(comments: Iterable[Comment]) -> int:
    """Count comments including all nested replies."""
    total = 0
    todo = list(comments)
    while todo:
        comment = todo.pop()
        total += 1
        todo.extend(comment.children)
    return total
