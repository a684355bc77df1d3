"""Integration fixtures: real client and settings, only the HTTP transport is faked."""

import httpx
import pytest

from github_user_fetcher import client as client_mod
from github_user_fetcher.settings import get_settings


@pytest.fixture(autouse=True)
def env(tmp_path, monkeypatch):
    """Isolated working directory and environment for each test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))
    for var in ("GITHUB_API_URL", "SEARCH_LOCATION", "MIN_FOLLOWERS", "SEARCH_PER_PAGE", "MAX_WORKERS"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    monkeypatch.setattr(client_mod, "_client", None)
    yield tmp_path
    get_settings.cache_clear()


class FakeGitHub:
    """In-memory stand-in for the GitHub endpoints the fetch uses."""

    def __init__(self, users, repos=None, failing=(), search_error=False):
        self.users = users
        self.repos = repos or {}
        self.failing = set(failing)
        self.search_error = search_error
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if parts == ["search", "users"]:
            if self.search_error:
                return httpx.Response(500, json={"message": "Server Error"})
            per_page = int(request.url.params["per_page"])
            page = int(request.url.params["page"])
            logins = sorted(self.users)[(page - 1) * per_page : page * per_page]
            return httpx.Response(
                200,
                json={"total_count": len(self.users), "items": [{"login": login, "id": 1} for login in logins]},
            )

        login = parts[1]
        if login in self.failing or login not in self.users:
            return httpx.Response(404, json={"message": "Not Found"})
        if parts[2:] == ["repos"]:
            return httpx.Response(200, json=self.repos.get(login, []))
        return httpx.Response(200, json=self.users[login])

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_github():
    return FakeGitHub
