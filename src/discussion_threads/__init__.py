"""Normalize discussion threads from link aggregators and render them as HTML."""

from discussion_threads.core.render.html import render_thread
from discussion_threads.core.render.text import pluralize
from discussion_threads.core.tree.reconcile import reconcile_comments, reconcile_thread
from discussion_threads.fetcher import PageFetcher
from discussion_threads.models.thread import Comment, Thread, count_all_comments
from discussion_threads.protocols import FetcherProtocol, ProviderProtocol
from discussion_threads.providers.registry import ProviderRegistry, default_registry
from discussion_threads.service import DiscussionService

__all__ = [
    "Comment",
    "DiscussionService",
    "FetcherProtocol",
    "PageFetcher",
    "ProviderProtocol",
    "ProviderRegistry",
    "Thread",
    "count_all_comments",
    "default_registry",
    "pluralize",
    "reconcile_comments",
    "reconcile_thread",
    "render_thread",
]
