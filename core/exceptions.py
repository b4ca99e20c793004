# core/exceptions.py
from django.core.exceptions import ImproperlyConfigured
from rest_framework import exceptions, serializers, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

MISSING_FIELDS_MESSAGE = 'Missing required fields'


class RelayError(Exception):
    """Base class for errors raised while relaying scores to the spreadsheet."""


class ValidationError(RelayError, serializers.ValidationError):
    """The submitted payload is missing one of the required fields."""


class UpstreamError(RelayError):
    """
    The spreadsheet API could not be reached, refused our credentials or
    returned something we can't read. The message is for logs only.
    """


class ConfigurationError(RelayError, ImproperlyConfigured):
    """Credentials are missing or unparseable. Raised at startup only."""


def envelope_exception_handler(exc, context):
    """
    DRF exception handler that wraps framework errors (bad JSON, wrong method)
    in the same envelope the views use.
    """
    # A body we can't read as JSON has none of the required fields.
    if isinstance(exc, exceptions.UnsupportedMediaType):
        return Response(
            {'success': False, 'error': MISSING_FIELDS_MESSAGE},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = getattr(exc, 'detail', None)
    if isinstance(detail, str):
        message = detail
    elif response.status_code == status.HTTP_400_BAD_REQUEST:
        message = 'Invalid request'
    else:
        message = response.status_text

    return Response(
        {'success': False, 'error': str(message)},
        status=response.status_code,
        headers={k: v for k, v in response.items() if k in ('Allow', 'Retry-After')},
    )
