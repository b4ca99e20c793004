"""Tests for the Google Sheets store adapter, with the API client mocked out."""

import http.client
from unittest import mock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from core.exceptions import ConfigurationError, UpstreamError
from core.sheets import SheetsStore


@pytest.fixture
def store(settings):
    settings.SPREADSHEET_ID = "sheet-123"
    settings.SHEET_NAME = "Scores"
    store = SheetsStore()
    store.service = mock.MagicMock()
    return store


def values_api(store):
    return store.service.spreadsheets.return_value.values.return_value


def test_append_row_request_shape(store):
    row = ["Ada", "Lovelace", "AE", "ada@example.com", "", 5, "2024-05-01T12:30:00.000Z", "No"]

    store.append_row(row)

    values_api(store).append.assert_called_once_with(
        spreadsheetId="sheet-123",
        range="Scores!A:H",
        valueInputOption="USER_ENTERED",
        body={"values": [row]},
    )
    values_api(store).append.return_value.execute.assert_called_once_with()


def test_read_rows_reads_a_to_f(store):
    values_api(store).get.return_value.execute.return_value = {"values": [["a", "b"]]}

    assert store.read_rows() == [["a", "b"]]
    values_api(store).get.assert_called_once_with(spreadsheetId="sheet-123", range="Scores!A:F")


def test_read_rows_empty_sheet(store):
    values_api(store).get.return_value.execute.return_value = {"range": "Scores!A1:F1000"}

    assert store.read_rows() == []


def test_read_rows_malformed_response(store):
    values_api(store).get.return_value.execute.return_value = {"values": "nope"}

    with pytest.raises(UpstreamError):
        store.read_rows()


@pytest.mark.parametrize("error", [
    ConnectionResetError("connection reset by peer"),
    HttpError(httplib2.Response({"status": "403"}), b"forbidden"),
    http.client.IncompleteRead(b""),
])
def test_transport_and_api_errors_become_upstream_errors(store, error):
    values_api(store).append.return_value.execute.side_effect = error
    values_api(store).get.return_value.execute.side_effect = error

    with pytest.raises(UpstreamError):
        store.append_row(["x"])
    with pytest.raises(UpstreamError):
        store.read_rows()


def test_use_before_connect_is_an_upstream_error():
    with pytest.raises(UpstreamError):
        SheetsStore().read_rows()


def test_connect_rejects_incomplete_credentials():
    with pytest.raises(ConfigurationError):
        SheetsStore().connect({"client_email": "svc@example.com"})


def test_connect_resolves_credentials_from_settings(settings, tmp_path):
    settings.GOOGLE_CREDENTIALS_FILE = str(tmp_path / "missing.json")
    settings.GOOGLE_CREDENTIALS = None

    with pytest.raises(ConfigurationError):
        SheetsStore().connect()


def test_connect_is_idempotent(store):
    service = store.service

    with mock.patch("core.sheets.build") as build:
        store.connect()

    build.assert_not_called()
    assert store.service is service
