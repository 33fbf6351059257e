"""Repository descriptor model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """A GitHub repository as returned by the REST API.

    Only the fields used for selection and index metadata are kept; any other
    keys in the API payload are ignored. Every field may be absent.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    full_name: str | None = None
    html_url: str | None = None
    clone_url: str | None = None
    visibility: str | None = None
    private: bool | None = None
    archived: bool | None = None
    fork: bool | None = None
    topics: tuple[str, ...] | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    subscribers_count: int | None = None
    forks_count: int | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "Repository":
        """Build a repository from a raw API payload."""
        return cls.model_validate(payload)

    @property
    def is_archived(self) -> bool:
        """Missing archived flag counts as not archived."""
        return self.archived is True

    @property
    def topic_list(self) -> list[str]:
        return list(self.topics or ())
