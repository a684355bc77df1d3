"""GitHub REST API client using httpx."""

import httpx

from .models import ApiResponse
from .settings import Settings, get_settings


class GitHubRestClient:
    """Thin client for GitHub REST API GET endpoints.

    One request per call: no retry, no throttle, no cache. The underlying
    httpx.Client is shared by the fan-out worker threads.
    """

    def __init__(self, settings: Settings | None = None, transport: httpx.BaseTransport | None = None):
        settings = settings or get_settings()
        if not settings.github_token:
            raise RuntimeError("GITHUB_TOKEN is not set")
        self._client = httpx.Client(
            base_url=settings.github_api_url,
            headers={
                "Authorization": f"token {settings.github_token}",
                "Accept": "application/vnd.github+json",
            },
            timeout=settings.request_timeout,
            transport=transport,
        )

    def api(self, endpoint, params=None) -> ApiResponse:
        """Make a GitHub REST API GET call.

        Args:
            endpoint: API path, e.g. "users/octocat/repos"
            params: Query parameters dict

        Returns:
            ApiResponse with status and decoded body.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            httpx.HTTPError: On transport failures and timeouts
            ValueError: If the body is not valid JSON
        """
        ep = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        resp = self._client.get(ep, params=params)

        if not 200 <= resp.status_code < 300:
            raise httpx.HTTPStatusError(
                f"GitHub API error {resp.status_code}: GET {ep}",
                request=resp.request,
                response=resp,
            )

        return ApiResponse(
            status=resp.status_code,
            body=resp.json() if resp.content else {},
        )

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


# Singleton client
_client: GitHubRestClient | None = None


def get_client() -> GitHubRestClient:
    """Get the shared GitHubRestClient, creating a new one if it was closed."""
    global _client
    if _client is None or _client.closed:
        _client = GitHubRestClient()
    return _client
