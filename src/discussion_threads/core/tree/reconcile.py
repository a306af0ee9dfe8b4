"""Reconcile flat, depth-annotated comment lists into nested trees."""

from collections.abc import Sequence
from dataclasses import replace

from discussion_threads.errors import MalformedInputError
from discussion_threads.models.thread import Comment, Thread


def validate_comments(comments: Sequence[Comment]) -> None:
    """Reject comment trees that cannot be reconciled.

    Raises:
        MalformedInputError: If any comment, at any nesting level, has a negative depth.
    """
    todo = list(comments)
    while todo:
        comment = todo.pop()
        if comment.depth < 0:
            raise MalformedInputError(comment.id, comment.depth)
        todo.extend(comment.children)


def is_nested(comments: Sequence[Comment]) -> bool:
    """Whether the comments already carry explicit parent/child linkage."""
    return any(comment.children for comment in comments)


def reconcile_comments(comments: Sequence[Comment]) -> tuple[Comment, ...]:
    """Turn a flat pre-order comment list into a tree.

    Nesting is implied by depth transitions: every comment owns the run of
    immediately following comments that are deeper than itself.
    Input that already has children on any top-level comment is returned
    unchanged.

    Depth gaps are tolerated: in ``[depth 0, depth 2]`` the second comment
    becomes the only child of the first. Depth values are kept as-is.

    Raises:
        MalformedInputError: If a comment has a negative depth.
    """
    validate_comments(comments)
    if is_nested(comments):
        return tuple(comments)
    return tuple(node for node, _consumed in _build_level(comments))


def reconcile_thread(thread: Thread) -> Thread:
    """Return a copy of ``thread`` whose comments are in nested shape."""
    return replace(thread, comments=reconcile_comments(thread.comments))


def _build_level(comments: Sequence[Comment]) -> list[tuple[Comment, int]]:
    """Build the sibling nodes of one level from a slice.

    Every comment not swallowed by a preceding sibling's subtree becomes a
    node on this level and owns the following run of comments deeper than
    itself. This is also how a comment behind a depth gap ends up attached
    to the nearest shallower comment. Returns ``(node, consumed)`` pairs where
    ``consumed`` counts the node and its descendants.

    Takes one stack frame per nesting level, so reply chains nested close to
    ``sys.getrecursionlimit()`` levels deep are out of reach.
    """
    nodes: list[tuple[Comment, int]] = []
    start = 0
    while start < len(comments):
        end = _subtree_end(comments, start + 1, comments[start].depth)
        children = tuple(node for node, _consumed in _build_level(comments[start + 1 : end]))
        nodes.append((replace(comments[start], children=children), end - start))
        start = end
    return nodes


def _subtree_end(comments: Sequence[Comment], start: int, depth: int) -> int:
    """Index of the first comment no deeper than ``depth``, from ``start`` on."""
    end = start
    while end < len(comments) and comments[end].depth > depth:
        end += 1
    return end
