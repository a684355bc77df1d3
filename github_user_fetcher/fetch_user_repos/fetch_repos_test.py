"""Unit tests for repository collection."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from ..models import ApiResponse, RepoRecord, UserDetail
from .fetch_repos import fetch_user_repos, fetch_user_repos_concurrently, fetch_user_repos_results


@pytest.fixture(autouse=True)
def settings():
    with patch(
        "github_user_fetcher.fetch_user_repos.fetch_repos.get_settings",
        return_value=MagicMock(max_workers=None, repos_per_page=500),
    ) as mock:
        yield mock


def _repo(owner, name, **fields):
    item = {
        "full_name": f"{owner}/{name}",
        "created_at": "2020-05-06T07:08:09Z",
        "stargazers_count": 12,
        "watchers_count": 12,
        "language": "Go",
        "has_projects": True,
        "has_wiki": False,
        "license": {"key": "mit", "name": "MIT License"},
        "owner": {"login": owner},
    }
    item.update(fields)
    return item


def _mock_client(repos_per_user=2, failing=()):
    client = MagicMock()

    def api_side_effect(endpoint, params=None):
        login = endpoint.split("/")[1]
        if login in failing:
            raise httpx.HTTPStatusError("404", request=MagicMock(), response=MagicMock())
        return ApiResponse(status=200, body=[_repo(login, f"r{i}") for i in range(repos_per_user)])

    client.api.side_effect = api_side_effect
    return client


def describe_fetch_user_repos():
    def it_requests_a_single_page_with_configured_size():
        client = _mock_client()

        fetch_user_repos(client, "alice")

        client.api.assert_called_once_with("users/alice/repos", params={"per_page": 500})

    def it_tags_every_repo_with_the_owner_login():
        repos = fetch_user_repos(_mock_client(repos_per_user=3), "alice")

        assert len(repos) == 3
        assert all(r.login == "alice" for r in repos)

    def it_maps_repo_fields():
        client = MagicMock()
        client.api.return_value = ApiResponse(status=200, body=[_repo("alice", "tool")])

        (repo,) = fetch_user_repos(client, "alice")

        assert repo == RepoRecord(
            login="alice",
            full_name="alice/tool",
            created_at="2020-05-06T07:08:09Z",
            stargazers_count=12,
            watchers_count=12,
            language="Go",
            has_projects=True,
            has_wiki=False,
            license_name="MIT License",
        )

    def it_leaves_license_and_language_empty_when_missing():
        client = MagicMock()
        client.api.return_value = ApiResponse(status=200, body=[_repo("alice", "x", license=None, language=None)])

        (repo,) = fetch_user_repos(client, "alice")

        assert repo.license_name == ""
        assert repo.language == ""

    def it_returns_empty_for_users_without_repos():
        client = MagicMock()
        client.api.return_value = ApiResponse(status=200, body=[])

        assert fetch_user_repos(client, "alice") == []


def describe_fetch_user_repos_concurrently():
    def it_flattens_repos_from_every_user():
        users = [UserDetail(login=k) for k in ["a", "b", "c"]]

        repos = fetch_user_repos_concurrently(users, client=_mock_client(repos_per_user=2))

        assert len(repos) == 6
        assert sorted({r.login for r in repos}) == ["a", "b", "c"]

    def it_drops_users_whose_fetch_fails():
        users = [UserDetail(login=k) for k in ["a", "b", "c"]]

        repos = fetch_user_repos_concurrently(users, client=_mock_client(failing={"b"}))

        assert {r.login for r in repos} == {"a", "c"}

    def it_only_requests_repos_for_the_given_users():
        client = _mock_client()

        fetch_user_repos_concurrently([UserDetail(login="a"), UserDetail(login="c")], client=client)

        endpoints = sorted(call.args[0] for call in client.api.call_args_list)
        assert endpoints == ["users/a/repos", "users/c/repos"]

    def it_keys_repos_by_the_login_used_for_the_fetch():
        users = [UserDetail(login=k) for k in ["a", "b"]]

        results = fetch_user_repos_results(users, client=_mock_client())

        for result in results:
            assert all(repo.login == result.key for repo in result.value)

    def it_returns_empty_for_no_users():
        assert fetch_user_repos_concurrently([], client=_mock_client()) == []
