# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authlete

"""
Custom exceptions for the coreason-authlete package.
"""


class CoreasonAuthleteError(Exception):
    """Base exception for all coreason-authlete errors."""


class JsonFormatError(CoreasonAuthleteError, ValueError):
    """Raised when a field holding JSON text cannot be parsed as the expected JSON type."""


class MetadataFormatError(JsonFormatError):
    """
    Raised when credential issuer metadata cannot be converted into its map form
    because one of its embedded JSON properties is malformed.
    """


class AuthleteApiError(CoreasonAuthleteError):
    """
    Raised when a call to the Authlete API fails.

    Either the request could not be sent (network error, timeout) or the API replied
    with a non-2xx status. In the latter case the status and the raw body are kept.

    Attributes:
        status_code (int): HTTP status code of the reply, 0 if there was no reply.
        status_message (str | None): HTTP reason phrase of the reply.
        response_body (str | None): Raw body of the reply.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        status_message: str | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_message = status_message
        self.response_body = response_body


class OversizedResponseError(AuthleteApiError):
    """Raised when an HTTP response is too large."""
