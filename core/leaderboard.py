# core/leaderboard.py
from .models import HEADER_LABEL, LEADERBOARD_COLUMNS, ROW_COLUMNS, LeaderboardEntry

# Number of entries served by the leaderboard endpoint
LEADERBOARD_SIZE = 10


def _column_letter(count):
    return chr(ord('A') + count - 1)


def write_range(sheet_name):
    """A1 range covering every stored column, e.g. ``Sheet1!A:H``."""
    return f"{sheet_name}!A:{_column_letter(len(ROW_COLUMNS))}"


def read_range(sheet_name):
    """
    A1 range read back for ranking, e.g. ``Sheet1!A:F``.
    The timestamp and opt-in columns are never read.
    """
    return f"{sheet_name}!A:{_column_letter(len(LEADERBOARD_COLUMNS))}"


def has_header(rows):
    return bool(rows) and bool(rows[0]) and rows[0][0] == HEADER_LABEL


def rank_rows(rows, limit: int = LEADERBOARD_SIZE):
    """
    Turn raw sheet rows into the top ``limit`` leaderboard entries.

    The header row is skipped when the first cell carries the header label.
    Entries are ordered by score, highest first. sorted() is stable, so equal
    scores keep sheet order: the earliest submission ranks first.
    """
    data_rows = rows[1:] if has_header(rows) else rows
    entries = [LeaderboardEntry.from_row(row) for row in data_rows]
    entries = sorted(entries, key=lambda entry: entry.score, reverse=True)
    return entries[:limit]
