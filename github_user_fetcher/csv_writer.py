"""Write fetched records to CSV files."""

import csv
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from .models import REPO_COLUMNS, REPOS_CSV, USER_COLUMNS, USERS_CSV, RepoRecord, UserDetail
from .settings import get_settings


def _log(msg: str):
    sys.stderr.write(f"[csv] {msg}\n")
    sys.stderr.flush()


def format_value(value) -> str:
    """Render a field as CSV text: booleans as true/false, None as empty."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def write_csv(path: Path, columns: Sequence[str], rows: Iterable[Sequence]) -> int:
    """Write a header and rows to ``path``, replacing any existing file.

    Failing to open the file raises OSError. Once it is open, write errors
    are reported on stderr and the rest of the rows are skipped.
    Characters that cannot be encoded as utf-8 are replaced with "?".

    Returns the number of data rows written.
    """
    f = open(path, "w", newline="", encoding="utf-8", errors="replace")
    written = 0
    try:
        writer = csv.writer(f)
        writer.writerow(columns)
        for row in rows:
            writer.writerow([format_value(v) for v in row])
            written += 1
    except (OSError, ValueError) as e:
        _log(f"Write to {path} stopped after {written} rows: {e}")
    finally:
        # Buffered rows are flushed here, so a full disk shows up on close
        try:
            f.close()
        except OSError as e:
            _log(f"Flushing {path} failed after {written} rows: {e}")
    return written


def _default_path(name: str) -> Path:
    return Path(get_settings().output_dir) / name


def save_users_to_csv(users: Iterable[UserDetail], path: Path | None = None) -> int:
    """Write users to users.csv (or ``path``)."""
    return write_csv(path or _default_path(USERS_CSV), USER_COLUMNS, (u.to_row() for u in users))


def save_repos_to_csv(repos: Iterable[RepoRecord], path: Path | None = None) -> int:
    """Write repos to repositories.csv (or ``path``)."""
    return write_csv(path or _default_path(REPOS_CSV), REPO_COLUMNS, (r.to_row() for r in repos))
