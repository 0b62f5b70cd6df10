"""
Barikoi API Exceptions

This module contains custom exception classes for handling Barikoi API errors
and the classifier that maps HTTP status codes to them.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .constants import DEFAULT_API_ERROR_MESSAGE, DEFAULT_VALIDATION_MESSAGE, ErrorKind

logger = logging.getLogger(__name__)


class BarikoiError(Exception):
    """Base exception class for all Barikoi SDK errors, dood!

    All other exceptions in this module inherit from this base class.

    Attributes:
        message: Human-readable error message
        statusCode: HTTP status code (``None`` for errors raised before any request)
        errorData: Raw API error payload (empty dict if unavailable)
    """

    def __init__(
        self,
        message: str,
        statusCode: Optional[int] = None,
        errorData: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.statusCode = statusCode
        self.errorData: Dict[str, Any] = errorData if errorData is not None else {}
        logger.debug(f"{type(self).__name__}: {message} (status: {statusCode})")

    def __str__(self) -> str:
        return self.message

    def getErrorData(self) -> Dict[str, Any]:
        """Get raw error payload returned by the API"""
        return self.errorData

    def getErrorMessage(self) -> str:
        """Get the upstream ``message`` field, falling back to own message"""
        apiMessage = self.errorData.get("message")
        if isinstance(apiMessage, str) and apiMessage:
            return apiMessage
        return self.message


class BarikoiApiError(BarikoiError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        category: Error category derived from the status code
        apiMessage: Message reported by the API (or a default)
    """

    def __init__(
        self,
        message: str,
        statusCode: Optional[int] = None,
        errorData: Optional[Dict[str, Any]] = None,
        category: ErrorKind = ErrorKind.UNKNOWN,
        apiMessage: Optional[str] = None,
    ) -> None:
        super().__init__(message, statusCode, errorData)
        self.category = category
        self.apiMessage = apiMessage if apiMessage is not None else DEFAULT_API_ERROR_MESSAGE

    @classmethod
    def fromResponse(cls, statusCode: int, errorData: Dict[str, Any]) -> "BarikoiApiError":
        """Build error from HTTP status and parsed response body.

        Args:
            statusCode: HTTP status code
            errorData: Parsed JSON body (may be empty)

        Returns:
            BarikoiApiError with categorized message
        """
        apiMessage = _extractMessage(errorData, DEFAULT_API_ERROR_MESSAGE)
        return cls(
            formatErrorMessage(statusCode, apiMessage),
            statusCode=statusCode,
            errorData=errorData,
            category=classifyStatus(statusCode),
            apiMessage=apiMessage,
        )


class BarikoiValidationError(BarikoiError):
    """Raised when input validation fails.

    Raised locally before any request is sent (bad coordinates, too many
    waypoints, unsupported options, ...), or when the API answers with 400.

    Attributes:
        category: Always ``ErrorKind.BAD_REQUEST``
        apiMessage: Message reported by the API (or a default)
        validationErrors: Field name to list of errors, as sent by the API
        errorCode: Machine-readable reason for local routing checks
            (e.g. ``"too_many_waypoints"``), ``None`` otherwise
        details: Structured description of a local routing check failure
    """

    category = ErrorKind.BAD_REQUEST

    def __init__(
        self,
        message: str,
        statusCode: Optional[int] = None,
        errorData: Optional[Dict[str, Any]] = None,
        validationErrors: Optional[Dict[str, Any]] = None,
        errorCode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        apiMessage: Optional[str] = None,
    ) -> None:
        super().__init__(message, statusCode, errorData)
        self.apiMessage = apiMessage if apiMessage is not None else DEFAULT_VALIDATION_MESSAGE
        self.validationErrors: Dict[str, Any] = validationErrors if validationErrors is not None else {}
        self.errorCode = errorCode
        self.details: Dict[str, Any] = details if details is not None else {}

    @classmethod
    def fromResponse(cls, statusCode: int, errorData: Dict[str, Any]) -> "BarikoiValidationError":
        """Build validation error from a 400 response body, dood!"""
        apiMessage = _extractMessage(errorData, DEFAULT_VALIDATION_MESSAGE)
        errors = errorData.get("errors")
        if not isinstance(errors, dict):
            errors = {}

        return cls(
            formatValidationMessage(apiMessage, errors),
            statusCode=statusCode,
            errorData=errorData,
            validationErrors=errors,
            apiMessage=apiMessage,
        )

    @classmethod
    def fromDetails(cls, details: Dict[str, Any]) -> "BarikoiValidationError":
        """Build validation error from a structured routing check failure.

        Args:
            details: Dict with at least ``error`` and ``message`` keys
        """
        return cls(
            details["message"],
            statusCode=details.get("status"),
            errorCode=details["error"],
            details=details,
        )

    def getValidationErrors(self) -> Dict[str, Any]:
        """Get field errors reported by the API"""
        return self.validationErrors


class BarikoiNetworkError(BarikoiError):
    """Raised when the request could not be completed (timeouts, DNS, connection errors)."""

    def __init__(self, message: str = "Network error occurred.") -> None:
        super().__init__(message)


class BarikoiConfigurationError(BarikoiError):
    """Raised when the client is misconfigured (e.g. unreadable config file)."""


def _extractMessage(errorData: Dict[str, Any], default: str) -> str:
    message = errorData.get("message")
    if message is None or message == "":
        return default
    return str(message)


def classifyStatus(statusCode: int) -> ErrorKind:
    """Map HTTP status code to error category.

    Args:
        statusCode: HTTP status code

    Returns:
        ErrorKind of the status
    """
    if statusCode == 400:
        return ErrorKind.BAD_REQUEST
    elif statusCode == 401:
        return ErrorKind.AUTH_FAILED
    elif statusCode == 403:
        return ErrorKind.ACCESS_DENIED
    elif statusCode == 404:
        return ErrorKind.NOT_FOUND
    elif statusCode == 429:
        return ErrorKind.RATE_LIMITED
    elif statusCode == 500:
        return ErrorKind.SERVER_ERROR
    elif statusCode in (502, 503, 504):
        return ErrorKind.UNAVAILABLE

    return ErrorKind.UNKNOWN


def formatErrorMessage(statusCode: int, apiMessage: str) -> str:
    """Build human-readable message for a failed API call"""
    category = classifyStatus(statusCode)

    if category == ErrorKind.BAD_REQUEST:
        return f"Bad Request: {apiMessage}. Please check your input parameters."
    elif category == ErrorKind.AUTH_FAILED:
        return f"Authentication Failed: {apiMessage}. Please verify your API key is correct."
    elif category == ErrorKind.ACCESS_DENIED:
        return f"Access Denied: {apiMessage}. Your API key does not have permission for this operation."
    elif category == ErrorKind.NOT_FOUND:
        return f"Not Found: {apiMessage}. The requested resource or endpoint does not exist."
    elif category == ErrorKind.RATE_LIMITED:
        return f"Rate Limit Exceeded: {apiMessage}. Please reduce the number of requests or try again later."
    elif category == ErrorKind.SERVER_ERROR:
        return f"Server Error: {apiMessage}. The Barikoi API is experiencing issues. Please try again later."
    elif category == ErrorKind.UNAVAILABLE:
        return (
            f"Service Unavailable: {apiMessage}. "
            "The Barikoi API is temporarily unavailable. Please try again later."
        )

    return f"API Error ({statusCode}): {apiMessage}"


def formatValidationMessage(apiMessage: str, errors: Dict[str, Union[List[Any], Any]]) -> str:
    """Build multi-line validation message listing every field error"""
    message = f"Validation Error: {apiMessage}"

    if errors:
        message += "\nDetails:"
        for field, fieldErrors in errors.items():
            if isinstance(fieldErrors, (list, tuple)):
                errorList = ", ".join(str(err) for err in fieldErrors)
            else:
                errorList = str(fieldErrors)
            message += f"\n  - {field}: {errorList}"

    return message


def parseApiError(statusCode: int, errorData: Dict[str, Any]) -> BarikoiError:
    """Parse API error response and return appropriate exception.

    Args:
        statusCode: HTTP status code
        errorData: Parsed JSON response from API

    Returns:
        BarikoiValidationError for 400, BarikoiApiError otherwise

    Example:
        >>> error = parseApiError(401, {"message": "Invalid key"})
        >>> error.category
        <ErrorKind.AUTH_FAILED: 'auth_failed'>
    """
    if statusCode == 400:
        return BarikoiValidationError.fromResponse(statusCode, errorData)
    return BarikoiApiError.fromResponse(statusCode, errorData)
