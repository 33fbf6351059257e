"""Topics filter."""

from gh_mirror.config import FilterConfig
from gh_mirror.repository import Repository

from .base import BaseFilter, FilterResult, has_intersection


class TopicsFilter(BaseFilter):
    """Filter repositories based on topics.

    Supports:
    - include_topics: At least one of these topics must be present
    - exclude_topics: None of these topics can be present

    Exclusion is checked first and wins over inclusion.
    """

    name = "topics"

    def is_enabled(self, config: FilterConfig) -> bool:
        return bool(config.include_topics or config.exclude_topics)

    def evaluate(self, repo: Repository, config: FilterConfig) -> FilterResult:
        """Evaluate repository topics.

        Args:
            repo: Repository to check.
            config: Filter criteria.

        Returns:
            FilterResult indicating pass/fail.
        """
        repo_topics = repo.topic_list

        if config.exclude_topics and has_intersection(repo_topics, config.exclude_topics):
            excluded_found = sorted(set(repo_topics) & set(config.exclude_topics))
            return FilterResult(
                passed=False,
                reason=f"Repository has excluded topics: {', '.join(excluded_found)}",
                filter_name=self.name,
            )

        if config.include_topics and not has_intersection(repo_topics, config.include_topics):
            return FilterResult(
                passed=False,
                reason=f"Repository must have at least one of: {', '.join(config.include_topics)}",
                filter_name=self.name,
            )

        return FilterResult(passed=True, filter_name=self.name)
