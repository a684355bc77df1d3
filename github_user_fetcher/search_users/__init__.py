from .search import build_search_query, search_users

__all__ = ["build_search_query", "search_users"]
