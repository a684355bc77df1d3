from .fetch_repos import fetch_user_repos, fetch_user_repos_concurrently, fetch_user_repos_results

__all__ = ["fetch_user_repos", "fetch_user_repos_concurrently", "fetch_user_repos_results"]
