"""Render discussion threads as embeddable HTML."""

import io
from collections.abc import Sequence
from html import escape

from discussion_threads.config import DEFAULT_THEME, THEMES
from discussion_threads.core.render.text import pluralize
from discussion_threads.models.thread import Comment, Thread, count_all_comments

_ICON_EXPANDED = (
    '<span class="discussion-toggle-icon-expanded"><span class="icon">'
    '<svg width="1rem" height="1rem" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="m6 9 6 6 6-6"/>'
    "</svg></span></span>"
)
_ICON_COLLAPSED = (
    '<span class="discussion-toggle-icon-collapsed" style="display: none;"><span class="icon">'
    '<svg width="1rem" height="1rem" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="m9 18 6-6-6-6"/>'
    "</svg></span></span>"
)
_SEPARATOR = ' <span class="discussion-comment-separator">|</span> '


def theme_for_source(source: str) -> str:
    """Theme class token for a source tag."""
    return THEMES.get(source, DEFAULT_THEME)


def render_thread(thread: Thread) -> str:
    """Render a thread and its comment tree as one HTML fragment.

    The comments must already be in nested shape (see
    ``reconcile_thread``); nesting follows ``children`` only. The
    ``source`` tag affects nothing but the theme class on the outer
    container. ``content`` fields are embedded verbatim, every other text
    field is escaped.

    Args:
        thread: The thread to render.

    Returns:
        HTML string.
    """
    out = io.StringIO()
    out.write(f'<div class="discussion-thread discussion-{theme_for_source(thread.source)}">')

    if thread.title:
        out.write('<h2 class="discussion-title">')
        if thread.url:
            out.write(f'<a href="{escape(thread.url)}" target="_blank" rel="noopener">')
            out.write(f"{escape(thread.title)}</a>")
        else:
            out.write(escape(thread.title))
        out.write("</h2>")

    out.write('<div class="discussion-meta text-muted mb-3">')
    meta: list[str] = []
    if thread.points is not None:
        meta.append(f'<span class="discussion-points">{pluralize(thread.points, "point")}</span>')
    if thread.author:
        meta.append(f'by <span class="discussion-author">{escape(thread.author)}</span>')
    if thread.time:
        meta.append(f'<span class="discussion-time">{escape(thread.time)}</span>')
    out.write(" ".join(meta))
    out.write("</div>")

    if thread.content:
        out.write(f'<div class="discussion-content mb-4">{thread.content}</div>')

    if thread.comments:
        out.write("<hr>")
        out.write('<div class="discussion-comments">')
        total = count_all_comments(thread.comments)
        out.write(f'<h3 class="mb-3">{pluralize(total, "comment")}</h3>')
        _render_comments(out, thread.comments, 0)
        out.write("</div>")

    out.write("</div>")
    return out.getvalue()


def render_comments(comments: Sequence[Comment]) -> str:
    """Render a comment forest without the surrounding thread container."""
    out = io.StringIO()
    _render_comments(out, comments, 0)
    return out.getvalue()


def _render_comments(out: io.StringIO, comments: Sequence[Comment], depth: int) -> None:
    # Work items are either a comment to open at a depth or markup closing a reply block.
    todo: list[tuple[Comment, int] | str] = [(comment, depth) for comment in reversed(comments)]
    while todo:
        item = todo.pop()
        if isinstance(item, str):
            out.write(item)
            continue
        comment, depth = item
        out.write(
            f'<div class="discussion-comment" data-comment-id="{escape(comment.id)}" '
            f'data-depth="{depth}">'
        )

        out.write('<div class="discussion-comment-header">')
        out.write(
            '<button class="discussion-comment-toggle" onclick="discussionToggleComment(this)" '
            'title="Toggle this comment and its replies" data-expanded="true">'
        )
        out.write(_ICON_EXPANDED)
        out.write(_ICON_COLLAPSED)
        out.write("</button>")
        out.write(f' <span class="discussion-comment-author">{escape(comment.author)}</span>')
        if comment.time:
            out.write(f' <span class="discussion-comment-time">{escape(comment.time)}</span>')
        out.write(_SEPARATOR)
        out.write(
            '<button class="discussion-nav-btn discussion-nav-prev" '
            'onclick="discussionPrevComment(this)" title="Previous comment">prev</button>'
        )
        out.write(_SEPARATOR)
        out.write(
            '<button class="discussion-nav-btn discussion-nav-next" '
            'onclick="discussionNextComment(this)" title="Next comment">next</button>'
        )
        out.write("</div>")

        out.write('<div class="discussion-comment-body">')
        out.write(f'<div class="discussion-comment-content">{comment.content}</div>')
        out.write("</div>")

        if comment.children:
            out.write('<div class="discussion-comment-replies">')
            todo.append("</div></div>")
            todo.extend((child, depth + 1) for child in reversed(comment.children))
        else:
            out.write("</div>")
