"""Repository selection filters.

Provides a filter chain over archived status, visibility and topics.
"""

from gh_mirror.filters.archive import ArchiveFilter
from gh_mirror.filters.base import BaseFilter, FilterResult, has_intersection
from gh_mirror.filters.chain import FilterChain, filter_repositories
from gh_mirror.filters.topics import TopicsFilter
from gh_mirror.filters.visibility import VisibilityFilter

__all__ = [
    "ArchiveFilter",
    "BaseFilter",
    "FilterChain",
    "FilterResult",
    "TopicsFilter",
    "VisibilityFilter",
    "filter_repositories",
    "has_intersection",
]
