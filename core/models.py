# core/models.py
import re
from dataclasses import dataclass
from datetime import timezone as dt_timezone
from typing import Any

from django.utils import timezone

# --- Row schema ---
# Column order of one submission in the spreadsheet (A..H). Every positional
# read or write goes through these names.
ROW_COLUMNS = (
    'firstName',
    'lastName',
    'company',
    'email',
    'displayName',
    'score',
    'submittedAt',
    'communicationOptIn',
)

# The leaderboard only reads up to the score column (A..F).
LEADERBOARD_COLUMNS = ROW_COLUMNS[:ROW_COLUMNS.index('score') + 1]

# A sheet whose first cell holds this label has a header row.
HEADER_LABEL = ROW_COLUMNS[0]

_LEADING_INT = re.compile(r'\s*([+-]?\d+)', re.ASCII)


def column_index(name):
    return ROW_COLUMNS.index(name)


def is_present(value):
    """
    Loose truthiness of a client value: None, False, 0 and "" are absent.
    Empty lists and objects count as present.
    """
    return value not in (None, False, 0, '')


def parse_score(value) -> int:
    """
    Read a score cell the way a lenient integer parse would: take the leading
    integer and ignore the rest. Cells with no leading digits count as 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def timestamp(now=None) -> str:
    """UTC wall clock as ``2024-05-01T12:30:00.123Z``."""
    now = now or timezone.now()
    now = now.astimezone(dt_timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f'{now.microsecond // 1000:03d}Z'


@dataclass
class ScoreSubmission:
    """
    Represents a single score submission from the client.
    Only exists for the duration of the request; the spreadsheet row is the
    persisted form.
    """
    first_name: Any
    last_name: Any
    company: Any
    email: Any
    score: Any
    display_name: Any = ''
    communication_opt_in: Any = False

    def to_row(self, submitted_at=None) -> list:
        values = {
            'firstName': self.first_name,
            'lastName': self.last_name,
            'company': self.company,
            'email': self.email,
            'displayName': self.display_name if is_present(self.display_name) else '',
            'score': self.score,
            'submittedAt': submitted_at or timestamp(),
            'communicationOptIn': 'Yes' if is_present(self.communication_opt_in) else 'No',
        }
        return [values[name] for name in ROW_COLUMNS]

    def __str__(self):
        return f"{self.first_name} {self.last_name}: {self.score}"


@dataclass
class LeaderboardEntry:
    """Public projection of a stored row. Never carries the email column."""
    first_name: str
    last_name: str
    company: str
    display_name: str
    score: int

    @classmethod
    def from_row(cls, row):
        # The API trims trailing empty cells, so rows may be short.
        def cell(name):
            index = column_index(name)
            return row[index] if index < len(row) else None

        return cls(
            first_name=cell('firstName') or '',
            last_name=cell('lastName') or '',
            company=cell('company') or '',
            display_name=cell('displayName') or '',
            score=parse_score(cell('score')),
        )
