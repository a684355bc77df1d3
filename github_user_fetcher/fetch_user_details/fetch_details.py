"""Fetch full user profiles concurrently."""

from collections.abc import Iterable

from ..client import GitHubRestClient, get_client
from ..fan_out import fan_out, successes
from ..models import FetchResult, UserDetail, UserSummary
from ..settings import get_settings


def normalize_company(company: str | None) -> str:
    """Uppercase and trim a company name, dropping the leading "@" of an org handle.

    " @acme " -> "ACME". Applying it twice gives the same result as once.
    """
    if not company:
        return ""
    return company.strip().upper().lstrip("@").strip()


def fetch_user_detail(client: GitHubRestClient, login: str) -> UserDetail:
    """Fetch one profile from /users/{login} with the company normalized."""
    body = client.api(f"users/{login}").body
    return UserDetail.from_api(body, company=normalize_company(body.get("company")))


def fetch_user_details_results(
    users: Iterable[UserSummary | UserDetail],
    client: GitHubRestClient | None = None,
    max_workers: int | None = None,
) -> list[FetchResult[str, UserDetail]]:
    """Fetch every user's profile concurrently, keeping failures as results."""
    client = client or get_client()
    if max_workers is None:
        max_workers = get_settings().max_workers
    return fan_out(
        (user.login for user in users),
        lambda login: fetch_user_detail(client, login),
        max_workers=max_workers,
    )


def fetch_user_details(
    users: Iterable[UserSummary | UserDetail],
    client: GitHubRestClient | None = None,
    max_workers: int | None = None,
) -> list[UserDetail]:
    """Fetch every user's profile concurrently.

    Users whose fetch fails are left out. Order is whatever order the
    requests finished in.
    """
    return successes(fetch_user_details_results(users, client=client, max_workers=max_workers))
