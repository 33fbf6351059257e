"""Archive status filter."""

from gh_mirror.config import FilterConfig
from gh_mirror.repository import Repository

from .base import BaseFilter, FilterResult


class ArchiveFilter(BaseFilter):
    """Drop archived repositories when exclude_archived is set.

    A repository without an archived flag is treated as not archived.
    """

    name = "archive"

    def is_enabled(self, config: FilterConfig) -> bool:
        return config.exclude_archived

    def evaluate(self, repo: Repository, config: FilterConfig) -> FilterResult:  # noqa: ARG002
        """Evaluate repository archived status."""
        if repo.is_archived:
            return FilterResult(
                passed=False,
                reason="Repository is archived",
                filter_name=self.name,
            )

        return FilterResult(passed=True, filter_name=self.name)
