from .fetch_details import (
    fetch_user_detail,
    fetch_user_details,
    fetch_user_details_results,
    normalize_company,
)

__all__ = [
    "fetch_user_detail",
    "fetch_user_details",
    "fetch_user_details_results",
    "normalize_company",
]
