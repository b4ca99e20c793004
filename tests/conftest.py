"""Shared fixtures: an in-memory stand-in for the spreadsheet."""

import pytest
from rest_framework.test import APIClient

from core.exceptions import UpstreamError


class FakeStore:
    """Records appended rows and serves canned rows; can be told to fail."""

    def __init__(self, rows=None):
        self.rows = rows if rows is not None else []
        self.appended = []
        self.error = None

    def append_row(self, row):
        if self.error:
            raise self.error
        self.appended.append(row)

    def read_rows(self):
        if self.error:
            raise self.error
        return self.rows

    def fail_with(self, message="connection reset by peer"):
        self.error = UpstreamError(message)


@pytest.fixture
def fake_store(monkeypatch):
    store = FakeStore()
    monkeypatch.setattr("core.views.sheets_store", store)
    return store


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def submission():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "company": "Analytical Engines",
        "email": "ada@example.com",
        "displayName": "ada",
        "score": 120,
        "communicationOptIn": True,
    }
