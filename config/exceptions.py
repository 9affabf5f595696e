"""
API exception handler.

Every error leaves the API as ``{"error": "<message>"}``. DRF's own
payloads (``{"detail": ...}`` and per-field validation maps) are
reshaped here; field errors stay available under ``fields``.
"""
import logging

from rest_framework.views import exception_handler
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            message = _first_message(value)
            if message:
                return message
        return None
    if isinstance(detail, (list, tuple)):
        for item in detail:
            message = _first_message(item)
            if message:
                return message
        return None
    return str(detail) if detail is not None else None


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {
            'error': _first_message(exc.detail) or 'Invalid request.',
            'fields': response.data,
        }
    elif isinstance(response.data, dict) and 'detail' in response.data:
        data = dict(response.data)
        data['error'] = str(data.pop('detail'))
        response.data = data

    if response.status_code >= 500:
        logger.error("API error %s: %s", response.status_code, response.data.get('error'))

    return response
