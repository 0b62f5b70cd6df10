"""
Barikoi Response Normalizer

Turns raw HTTP responses into ListResult/RecordResult values or raises the
appropriate BarikoiError for non-2xx statuses.
"""

import json
import logging
from typing import Any, Dict

import httpx

from .exceptions import parseApiError
from .models import ApiResponse, ListResult, RecordResult

logger = logging.getLogger(__name__)


def shapeResponse(payload: Any) -> ApiResponse:
    """Wrap decoded JSON into a response container.

    JSON arrays become ListResult, JSON objects become RecordResult,
    ``null`` becomes an empty RecordResult and any other scalar is stored
    under the ``value`` key.
    """
    if payload is None:
        return RecordResult()
    if isinstance(payload, list):
        return ListResult(payload)
    if isinstance(payload, dict):
        return RecordResult(payload)
    return RecordResult({"value": payload})


def _decodeErrorBody(response: httpx.Response) -> Dict[str, Any]:
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {"message": response.text} if response.text else {}

    if isinstance(data, dict):
        return data
    return {"data": data} if data is not None else {}


def normalizeResponse(response: httpx.Response) -> ApiResponse:
    """Convert HTTP response into an ApiResponse, dood!

    Args:
        response: Completed httpx response

    Returns:
        ListResult or RecordResult depending on the JSON body shape

    Raises:
        BarikoiValidationError: On 400 responses
        BarikoiApiError: On any other non-2xx response
    """
    if response.is_success:
        body = response.content
        if not body or not body.strip():
            return RecordResult()

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Malformed JSON in successful response: {e}")
            return RecordResult()

        return shapeResponse(payload)

    errorData = _decodeErrorBody(response)
    logger.warning(f"API error: {response.status_code} {errorData}")
    raise parseApiError(response.status_code, errorData)
