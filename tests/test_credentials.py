"""Tests for the credential fallback chain."""

import json

import pytest

from core.credentials import load_credentials
from core.exceptions import ConfigurationError

FILE_INFO = {"client_email": "file@example.iam.gserviceaccount.com", "private_key": "file-key"}
ENV_INFO = {"client_email": "env@example.iam.gserviceaccount.com", "private_key": "env-key"}


def test_file_wins_over_environment(tmp_path):
    path = tmp_path / "creds.json"
    path.write_text(json.dumps(FILE_INFO))

    assert load_credentials(str(path), json.dumps(ENV_INFO)) == FILE_INFO


def test_missing_file_falls_back_to_environment(tmp_path):
    assert load_credentials(str(tmp_path / "nope.json"), json.dumps(ENV_INFO)) == ENV_INFO


def test_unparseable_file_falls_back_to_environment(tmp_path):
    path = tmp_path / "creds.json"
    path.write_text("{broken")

    assert load_credentials(str(path), json.dumps(ENV_INFO)) == ENV_INFO


def test_nothing_available_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_credentials(str(tmp_path / "nope.json"), None)


@pytest.mark.parametrize("env_value", ["{not json", "[1, 2]", '"just a string"'])
def test_bad_environment_value_is_a_configuration_error(tmp_path, env_value):
    with pytest.raises(ConfigurationError):
        load_credentials(str(tmp_path / "nope.json"), env_value)
