"""Fetch GitHub users matching a search, with their profiles and repositories.

Users are found with a paginated search, then profiles and repository
listings are fetched concurrently, one worker per user, and written to
users.csv and repositories.csv.
"""

from .cli import main
from .client import GitHubRestClient, get_client
from .models import ApiResponse, RepoRecord, UserDetail, UserSummary

__all__ = ["main", "GitHubRestClient", "get_client", "ApiResponse", "RepoRecord", "UserDetail", "UserSummary"]

if __name__ == "__main__":
    main()
