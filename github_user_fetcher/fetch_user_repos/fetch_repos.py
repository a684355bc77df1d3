"""Fetch repository listings for users concurrently."""

from collections.abc import Iterable

from ..client import GitHubRestClient, get_client
from ..fan_out import fan_out, successes
from ..models import FetchResult, RepoRecord, UserDetail, UserSummary
from ..settings import get_settings


def fetch_user_repos(client: GitHubRestClient, login: str, per_page: int | None = None) -> list[RepoRecord]:
    """Fetch one user's repos from /users/{login}/repos.

    Single request, no pagination: users with more repos than one page holds
    are truncated.
    """
    per_page = per_page or get_settings().repos_per_page
    body = client.api(f"users/{login}/repos", params={"per_page": per_page}).body
    # The listing has no field for the user it was fetched for
    return [RepoRecord.from_api(login, item) for item in body]


def fetch_user_repos_results(
    users: Iterable[UserSummary | UserDetail],
    client: GitHubRestClient | None = None,
    max_workers: int | None = None,
) -> list[FetchResult[str, list[RepoRecord]]]:
    """Fetch every user's repos concurrently, keeping failures as results."""
    client = client or get_client()
    if max_workers is None:
        max_workers = get_settings().max_workers
    return fan_out(
        (user.login for user in users),
        lambda login: fetch_user_repos(client, login),
        max_workers=max_workers,
    )


def fetch_user_repos_concurrently(
    users: Iterable[UserSummary | UserDetail],
    client: GitHubRestClient | None = None,
    max_workers: int | None = None,
) -> list[RepoRecord]:
    """Fetch and flatten every user's repos. Users whose fetch fails are left out."""
    results = fetch_user_repos_results(users, client=client, max_workers=max_workers)
    return [repo for repos in successes(results) for repo in repos]
