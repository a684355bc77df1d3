"""Data models and constants for the user and repository fetch."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

GITHUB_SEARCH_RESULT_LIMIT = 1000  # GitHub Search API hard limit per query

USERS_CSV = "users.csv"
REPOS_CSV = "repositories.csv"

USER_COLUMNS = [
    "login",
    "name",
    "company",
    "location",
    "email",
    "hireable",
    "bio",
    "public_repos",
    "followers",
    "following",
    "created_at",
]

REPO_COLUMNS = [
    "login",
    "full_name",
    "created_at",
    "stargazers_count",
    "watchers_count",
    "language",
    "has_projects",
    "has_wiki",
    "license_name",
]

K = TypeVar("K")
T = TypeVar("T")


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    return int(value) if value is not None else 0


@dataclass
class ApiResponse:
    """Response from the GitHub REST API client."""

    status: int
    body: dict | list


@dataclass(frozen=True)
class UserSummary:
    """A user as returned by the search endpoint. Only the login is used downstream."""

    login: str
    id: int | None = None
    html_url: str | None = None

    @classmethod
    def from_api(cls, item: dict) -> "UserSummary":
        return cls(login=item["login"], id=item.get("id"), html_url=item.get("html_url"))


@dataclass(frozen=True)
class UserDetail:
    """Full user profile from /users/{login}."""

    login: str
    name: str = ""
    company: str = ""
    location: str = ""
    email: str = ""
    hireable: bool = False
    bio: str = ""
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: str = ""

    @classmethod
    def from_api(cls, body: dict, company: str | None = None) -> "UserDetail":
        """Build from a profile body. JSON nulls become empty strings, False and 0.

        ``company`` overrides the raw company field (used for the normalized value).
        """
        return cls(
            login=body["login"],
            name=_str(body.get("name")),
            company=_str(body.get("company") if company is None else company),
            location=_str(body.get("location")),
            email=_str(body.get("email")),
            hireable=bool(body.get("hireable")),
            bio=_str(body.get("bio")),
            public_repos=_int(body.get("public_repos")),
            followers=_int(body.get("followers")),
            following=_int(body.get("following")),
            created_at=_str(body.get("created_at")),
        )

    def to_row(self) -> list:
        return [getattr(self, column) for column in USER_COLUMNS]


@dataclass(frozen=True)
class RepoRecord:
    """A repository owned by a fetched user."""

    login: str
    full_name: str = ""
    created_at: str = ""
    stargazers_count: int = 0
    watchers_count: int = 0
    language: str = ""
    has_projects: bool = False
    has_wiki: bool = False
    license_name: str = ""

    @classmethod
    def from_api(cls, owner: str, item: dict) -> "RepoRecord":
        """Build from a /users/{login}/repos item, tagged with the owner it was fetched for."""
        license_info = item.get("license") or {}
        return cls(
            login=owner,
            full_name=_str(item.get("full_name")),
            created_at=_str(item.get("created_at")),
            stargazers_count=_int(item.get("stargazers_count")),
            watchers_count=_int(item.get("watchers_count")),
            language=_str(item.get("language")),
            has_projects=bool(item.get("has_projects")),
            has_wiki=bool(item.get("has_wiki")),
            license_name=_str(license_info.get("name")),
        )

    def to_row(self) -> list:
        return [getattr(self, column) for column in REPO_COLUMNS]


@dataclass(frozen=True)
class FetchResult(Generic[K, T]):
    """Outcome of one fan-out task: either a value or the error that stopped it."""

    key: K
    value: T | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
