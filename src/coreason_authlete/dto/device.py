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
DTOs of the Device Authorization Grant APIs (RFC 8628).

The device authorization endpoint passes requests to ``/device/authorization``.
The verification endpoint checks the user code entered by the end-user with
``/device/verification`` and reports the end-user's decision with
``/device/complete``.
"""

from enum import StrEnum

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, format_summary
from coreason_authlete.dto.common import Property, Scope, stringify_scope_names
from coreason_authlete.types import CodedEnum


class CimdOptions(AuthleteModel):
    """
    Options for Client ID Metadata Documents, i.e. client IDs that are URLs
    pointing at the client's metadata.

    Attributes:
        always_retrieved (bool): Retrieve the metadata document even if it is cached.
        http_permitted (bool): Allow the ``http`` scheme for the document URL.
        query_permitted (bool): Allow a query component in the document URL.
    """

    always_retrieved: bool = False
    http_permitted: bool = False
    query_permitted: bool = False


class DeviceAuthorizationRequest(AuthleteModel):
    """Request to ``/device/authorization``."""

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    oauth_client_attestation: str | None = None
    oauth_client_attestation_pop: str | None = None
    cimd_options: CimdOptions | None = None


class DeviceAuthorizationResponse(ApiResponse):
    """
    Response from ``/device/authorization``.

    On ``OK`` the device authorization endpoint returns 200 with
    ``response_content``, which carries ``device_code``, ``user_code`` and the
    verification URIs.
    """

    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    scopes: list[Scope] | None = None
    device_code: str | None = None
    user_code: str | None = None
    verification_uri: str | None = None
    verification_uri_complete: str | None = None
    expires_in: int = 0
    interval: int = 0
    warnings: list[str] | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            clientId=self.client_id,
            clientName=self.client_name,
            scopes=stringify_scope_names(self.scopes),
            deviceCode=self.device_code,
            userCode=self.user_code,
            verificationUri=self.verification_uri,
            expiresIn=self.expires_in,
            interval=self.interval,
        )


class DeviceVerificationRequest(AuthleteModel):
    user_code: str | None = None


class DeviceVerificationResponse(ApiResponse):
    """
    Response from ``/device/verification``.

    ``VALID`` means the user code is valid and the end-user can be asked to
    authorize the client. ``EXPIRED`` and ``NOT_EXIST`` mean the code cannot be used.
    """

    class Action(StrEnum):
        VALID = "VALID"
        EXPIRED = "EXPIRED"
        NOT_EXIST = "NOT_EXIST"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    scopes: list[Scope] | None = None


class DeviceCompleteRequest(AuthleteModel):
    """
    Request to ``/device/complete``.

    ``subject`` is required when ``result`` is ``AUTHORIZED``.
    """

    class Result(CodedEnum):
        AUTHORIZED = ("AUTHORIZED", 1)
        ACCESS_DENIED = ("ACCESS_DENIED", 2)
        TRANSACTION_FAILED = ("TRANSACTION_FAILED", 3)

    user_code: str | None = None
    result: Result | None = None
    subject: str | None = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    error_description: str | None = None
    error_uri: str | None = None


class DeviceCompleteResponse(ApiResponse):
    class Action(StrEnum):
        SUCCESS = "SUCCESS"
        INVALID_REQUEST = "INVALID_REQUEST"
        USER_CODE_EXPIRED = "USER_CODE_EXPIRED"
        USER_CODE_NOT_EXIST = "USER_CODE_NOT_EXIST"
        SERVER_ERROR = "SERVER_ERROR"

    action: Action | None = None
