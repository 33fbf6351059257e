"""Visibility filter."""

from gh_mirror.config import FilterConfig
from gh_mirror.repository import Repository

from .base import BaseFilter, FilterResult


class VisibilityFilter(BaseFilter):
    """Keep repositories whose visibility is in the configured list.

    Enabled when the visibility list is non-empty. A repository without a
    visibility value never matches.
    """

    name = "visibility"

    def is_enabled(self, config: FilterConfig) -> bool:
        return bool(config.visibility)

    def evaluate(self, repo: Repository, config: FilterConfig) -> FilterResult:
        """Evaluate repository visibility.

        Args:
            repo: Repository to check.
            config: Filter criteria.

        Returns:
            FilterResult indicating pass/fail.
        """
        if repo.visibility is None:
            return FilterResult(
                passed=False,
                reason="Repository has no visibility, but visibility filter is active",
                filter_name=self.name,
            )

        if repo.visibility not in config.visibility:
            return FilterResult(
                passed=False,
                reason=f"Repository visibility is {repo.visibility}, expected one of: {', '.join(config.visibility)}",
                filter_name=self.name,
            )

        return FilterResult(passed=True, filter_name=self.name)
