"""Filter chain for coordinating repository selection filters."""

import logging
from collections import defaultdict
from collections.abc import Iterable

from gh_mirror.config import FilterConfig
from gh_mirror.repository import Repository

from .archive import ArchiveFilter
from .base import BaseFilter, FilterResult
from .topics import TopicsFilter
from .visibility import VisibilityFilter

logger = logging.getLogger(__name__)


class FilterChain:
    """Composable filter chain for repository selection.

    Coordinates the filters and tracks rejection statistics.
    """

    def __init__(self, config: FilterConfig) -> None:
        """Initialize filter chain from filter config.

        Args:
            config: Filter criteria.
        """
        self.config = config
        self.stats: dict[str, int] = defaultdict(int)

        self.filters: list[BaseFilter] = [
            ArchiveFilter(),
            VisibilityFilter(),
            TopicsFilter(),
        ]

    def evaluate(self, repo: Repository) -> FilterResult:
        """Evaluate all enabled filters for a repository.

        Short-circuits on first failure.

        Args:
            repo: Repository to check.

        Returns:
            FilterResult with pass/fail and rejection reason.
        """
        for filter_obj in self.filters:
            if not filter_obj.is_enabled(self.config):
                continue

            result = filter_obj.evaluate(repo, self.config)
            if not result.passed:
                return result

        return FilterResult(passed=True, filter_name="none")

    def record_rejection(self, filter_name: str) -> None:
        """Record a filter rejection for statistics.

        Args:
            filter_name: Name of the filter that rejected the repo.
        """
        self.stats[filter_name] += 1

    def get_stats(self) -> dict[str, int]:
        """Get filter rejection statistics.

        Returns:
            Dictionary mapping filter names to rejection counts.
        """
        return dict(self.stats)


def filter_repositories(
    repos: Iterable[Repository],
    config: FilterConfig,
) -> list[Repository]:
    """Select the repositories that pass every enabled filter.

    Args:
        repos: Repositories to select from.
        config: Filter criteria.

    Returns:
        Passing repositories, in their original order.
    """
    chain = FilterChain(config)
    selected: list[Repository] = []

    for repo in repos:
        result = chain.evaluate(repo)
        if result.passed:
            selected.append(repo)
            continue

        chain.record_rejection(result.filter_name)
        logger.debug("Skipping %s: %s", repo.full_name or "<unnamed>", result.reason)

    stats = chain.get_stats()
    logger.info(
        "Selected %d repositories (rejected: %d)",
        len(selected),
        sum(stats.values()),
    )
    for filter_name, count in sorted(stats.items(), key=lambda x: x[1], reverse=True):
        logger.info("  %s: %d", filter_name, count)

    return selected
