"""CLI entry point: search users, fetch their profiles and repos, write CSVs."""

import argparse
import logging

from .client import get_client
from .csv_writer import save_repos_to_csv, save_users_to_csv
from .fetch_user_details import fetch_user_details
from .fetch_user_repos import fetch_user_repos_concurrently
from .search_users import build_search_query, search_users
from .settings import get_settings

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def run() -> None:
    """Run the whole fetch. Errors are printed, never raised."""
    try:
        settings = get_settings()
        query = build_search_query(settings.search_location, settings.min_followers)
        client = get_client()
    except Exception as e:
        print("Error fetching users:", e, flush=True)
        return

    with client:
        _fetch_and_save(client, query)


def _fetch_and_save(client, query: str) -> None:
    try:
        print(f"Searching users: {query}", flush=True)
        users = search_users(client, query=query)
    except Exception as e:
        print("Error fetching users:", e, flush=True)
        return
    print(f"Found {len(users):,} users", flush=True)

    detailed_users = fetch_user_details(users, client=client)
    print(f"Fetched details for {len(detailed_users):,}/{len(users):,} users", flush=True)
    try:
        save_users_to_csv(detailed_users)
    except OSError as e:
        print("Error saving users to CSV:", e, flush=True)
        return

    all_repos = fetch_user_repos_concurrently(detailed_users, client=client)
    print(f"Fetched {len(all_repos):,} repositories", flush=True)
    try:
        save_repos_to_csv(all_repos)
    except OSError as e:
        print("Error saving repos to CSV:", e, flush=True)

    print("Done", flush=True)


def main():
    parser = argparse.ArgumentParser(
        description=(
            "Fetch GitHub users matching the configured search, with their profiles "
            "and repositories, into users.csv and repositories.csv"
        ),
        epilog="Configured with GITHUB_TOKEN, SEARCH_LOCATION, MIN_FOLLOWERS and friends (env or .env).",
    )
    parser.parse_args()
    run()


if __name__ == "__main__":
    main()
