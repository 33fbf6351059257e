"""Base filter interface for repository filtering."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from gh_mirror.config import FilterConfig
from gh_mirror.repository import Repository


def has_intersection(s1: Iterable[str], s2: Iterable[str]) -> bool:
    """Check whether two string collections share at least one element.

    Comparison is exact and case-sensitive. Empty inputs never intersect.
    """
    return not set(s1).isdisjoint(s2)


@dataclass
class FilterResult:
    """Result of a filter evaluation.

    Attributes:
        passed: Whether the repository passed the filter.
        reason: Optional reason for rejection (None if passed).
        filter_name: Name of the filter that produced this result.
    """

    passed: bool
    reason: str | None = None
    filter_name: str = ""


class BaseFilter(ABC):
    """Abstract base class for repository filters."""

    name: str = "base"

    @abstractmethod
    def is_enabled(self, config: FilterConfig) -> bool:
        """Check if this filter is enabled in the configuration.

        Args:
            config: Filter criteria.

        Returns:
            True if the filter should be applied.
        """

    @abstractmethod
    def evaluate(self, repo: Repository, config: FilterConfig) -> FilterResult:
        """Evaluate a repository against this filter.

        Args:
            repo: Repository to check.
            config: Filter criteria.

        Returns:
            FilterResult indicating pass/fail with optional reason.
        """
