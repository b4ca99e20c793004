# core/sheets.py
import http.client
import logging

import httplib2
from django.conf import settings
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .credentials import load_credentials
from .exceptions import ConfigurationError, UpstreamError
from .leaderboard import read_range, write_range

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
SCOPES = ['https://www.googleapis.com/auth/spreadsheets']
# Values are parsed as if typed into the sheet, so numeric scores stay numbers.
VALUE_INPUT_OPTION = 'USER_ENTERED'

# Errors from the client library or the transport that mean the upstream call failed
UPSTREAM_ERRORS = (
    HttpError,
    GoogleAuthError,
    httplib2.HttpLib2Error,
    http.client.HTTPException,
    OSError,
)


class SheetsStore:
    """
    Append/read access to the spreadsheet that holds every score submission.
    The sheet is append-only from here: rows are never updated or deleted.
    """

    def __init__(self):
        self.service = None

    @property
    def connected(self):
        return self.service is not None

    def connect(self, credentials_info=None):
        """
        Build the Sheets client. Called once at startup; calling it again is a
        no-op. Raises ConfigurationError when the credentials can't be used.
        """
        if self.connected:
            return self

        if credentials_info is None:
            credentials_info = load_credentials(
                settings.GOOGLE_CREDENTIALS_FILE,
                settings.GOOGLE_CREDENTIALS,
            )
        try:
            credentials = service_account.Credentials.from_service_account_info(
                credentials_info, scopes=SCOPES
            )
        except (ValueError, KeyError) as e:
            raise ConfigurationError(f"Invalid service account credentials: {e}") from e

        self.service = build('sheets', 'v4', credentials=credentials, cache_discovery=False)
        logger.info("Connected to spreadsheet %s", settings.SPREADSHEET_ID)
        return self

    def _values(self):
        if not self.connected:
            raise UpstreamError("Sheets store used before connect()")
        return self.service.spreadsheets().values()

    def append_row(self, row):
        """Append one submission row after the last row of the sheet."""
        request = self._values().append(
            spreadsheetId=settings.SPREADSHEET_ID,
            range=write_range(settings.SHEET_NAME),
            valueInputOption=VALUE_INPUT_OPTION,
            body={'values': [row]},
        )
        try:
            return request.execute()
        except UPSTREAM_ERRORS as e:
            raise UpstreamError(f"Append to spreadsheet failed: {e}") from e

    def read_rows(self):
        """
        Return every row in the leaderboard range, header included if present.
        An empty sheet comes back without a 'values' key, which reads as [].
        """
        request = self._values().get(
            spreadsheetId=settings.SPREADSHEET_ID,
            range=read_range(settings.SHEET_NAME),
        )
        try:
            response = request.execute()
        except UPSTREAM_ERRORS as e:
            raise UpstreamError(f"Read from spreadsheet failed: {e}") from e

        if not isinstance(response, dict):
            raise UpstreamError(f"Unexpected response from spreadsheet: {response!r}")
        rows = response.get('values', [])
        if not isinstance(rows, list):
            raise UpstreamError(f"Unexpected 'values' in spreadsheet response: {rows!r}")
        return rows


# Instantiate the store for use in views and at startup
sheets_store = SheetsStore()
