# core/credentials.py
import json
import logging

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _read_file(path):
    try:
        with open(path, encoding='utf-8') as fh:
            return json.load(fh)
    except FileNotFoundError:
        logger.debug("No local credentials file at %s", path)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable credentials file %s: %s", path, e)
    return None


def load_credentials(path=None, env_value=None):
    """
    Resolve the service account info used to talk to Google Sheets.

    The local credentials file wins when it exists and parses; otherwise the
    JSON in the GOOGLE_CREDENTIALS environment variable is used. If neither
    yields a JSON object a ConfigurationError is raised, which callers treat
    as fatal.
    """
    info = _read_file(path) if path else None
    if isinstance(info, dict):
        logger.info("Loaded Google credentials from %s", path)
        return info

    if not env_value:
        raise ConfigurationError(
            "No Google credentials found: provide a credentials file or set GOOGLE_CREDENTIALS"
        )
    try:
        info = json.loads(env_value)
    except ValueError as e:
        raise ConfigurationError(f"GOOGLE_CREDENTIALS is not valid JSON: {e}") from e
    if not isinstance(info, dict):
        raise ConfigurationError("GOOGLE_CREDENTIALS must be a JSON object")

    logger.info("Loaded Google credentials from the GOOGLE_CREDENTIALS environment variable")
    return info
