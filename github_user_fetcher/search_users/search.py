"""Paginated user search."""

from ..client import GitHubRestClient, get_client
from ..models import GITHUB_SEARCH_RESULT_LIMIT, UserSummary
from ..settings import get_settings


def build_search_query(location: str, min_followers: int) -> str:
    """Build a GitHub user search query, e.g. "location:Shanghai followers:>200"."""
    return f"location:{location} followers:>{min_followers}"


def search_users(
    client: GitHubRestClient | None = None,
    query: str | None = None,
    per_page: int | None = None,
) -> list[UserSummary]:
    """Fetch every page of a user search.

    Pages are requested from 1 upward until a page comes back with fewer than
    ``per_page`` items, or the next page would pass GitHub's 1000-result
    search limit. Any failed request propagates and the pages already
    collected are discarded.
    """
    settings = get_settings()
    client = client or get_client()
    query = query or build_search_query(settings.search_location, settings.min_followers)
    per_page = per_page or settings.search_per_page

    users: list[UserSummary] = []
    page = 1
    while True:
        resp = client.api("search/users", params={"q": query, "per_page": per_page, "page": page})
        items = resp.body.get("items") or []
        users.extend(UserSummary.from_api(item) for item in items)

        if len(items) < per_page:
            break
        if page * per_page >= GITHUB_SEARCH_RESULT_LIMIT:
            break
        page += 1

    return users
