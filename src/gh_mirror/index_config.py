"""Index metadata for mirrored repositories.

The mirror stores these values in each clone's git config so the indexer can
link results back to GitHub and rank them.
"""

from urllib.parse import urlparse

from gh_mirror.format import format_bool, format_optional_int
from gh_mirror.repository import Repository


def index_config(repo: Repository) -> dict[str, str]:
    """Build the index metadata for a repository.

    Args:
        repo: Repository to describe.

    Returns:
        Mapping of git config keys to string values.

    Raises:
        ValueError: If the repository has no web URL or full name.
    """
    if not repo.html_url or not repo.full_name:
        msg = f"Repository needs html_url and full_name for indexing: {repo.full_name or repo.html_url}"
        raise ValueError(msg)

    host = urlparse(repo.html_url).hostname
    if not host:
        msg = f"Cannot determine host from html_url: {repo.html_url}"
        raise ValueError(msg)

    return {
        "zoekt.web-url-type": "github",
        "zoekt.web-url": repo.html_url,
        "zoekt.name": f"{host}/{repo.full_name}",
        "zoekt.github-stars": format_optional_int(repo.stargazers_count),
        "zoekt.github-watchers": format_optional_int(repo.watchers_count),
        "zoekt.github-subscribers": format_optional_int(repo.subscribers_count),
        "zoekt.github-forks": format_optional_int(repo.forks_count),
        "zoekt.archived": format_bool(repo.is_archived),
        "zoekt.fork": format_bool(repo.fork is True),
        "zoekt.public": format_bool(repo.private is not True),
    }
