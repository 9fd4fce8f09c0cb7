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
DTOs of the pushed authorization request API (RFC 9126) and the revocation API (RFC 7009).
"""

from enum import StrEnum

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, format_summary
from coreason_authlete.types import ClientAuthMethod


class PushedAuthReqRequest(AuthleteModel):
    """
    Request to ``/pushed_auth_req``.

    Attributes:
        parameters (str | None): The body of the pushed authorization request.
        client_id (str | None): Client ID from the ``Authorization`` header, if any.
        client_secret (str | None): Client secret from the ``Authorization`` header, if any.
        client_certificate (str | None): PEM client certificate used in mutual TLS.
        client_certificate_path (list[str] | None): Intermediate certificates in PEM.
        dpop (str | None): The ``DPoP`` header value.
        htm (str | None): HTTP method of the request.
        htu (str | None): URL of the pushed authorization request endpoint.
    """

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None


class PushedAuthReqResponse(ApiResponse):
    """
    Response from ``/pushed_auth_req``.

    On ``CREATED`` the endpoint returns 201 with ``response_content``, which holds
    ``request_uri`` for the client to use at the authorization endpoint.
    """

    class Action(StrEnum):
        CREATED = "CREATED"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    client_auth_method: ClientAuthMethod | None = None
    request_uri: str | None = None
    dpop_nonce: str | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            responseContent=self.response_content,
            clientAuthMethod=self.client_auth_method,
            requestUri=self.request_uri,
        )


class RevocationRequest(AuthleteModel):
    """Request to ``/auth/revocation``; ``parameters`` is the RFC 7009 request body."""

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    oauth_client_attestation: str | None = None
    oauth_client_attestation_pop: str | None = None


class RevocationResponse(ApiResponse):
    """
    Response from ``/auth/revocation``.

    ``OK`` means the token was revoked (or was already invalid) and the
    revocation endpoint returns 200.
    """

    class Action(StrEnum):
        INVALID_CLIENT = "INVALID_CLIENT"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        OK = "OK"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return format_summary(action=self.action, responseContent=self.response_content)
