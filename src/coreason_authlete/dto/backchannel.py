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
DTOs of the CIBA (Client Initiated Backchannel Authentication) APIs.

The backchannel authentication endpoint passes the request to
``/backchannel/authentication``. When ``USER_IDENTIFICATION`` is returned, the
authorization server identifies the end-user from the hint and calls either
``/backchannel/authentication/issue`` (to issue ``auth_req_id``) or
``/backchannel/authentication/fail``. Once the end-user has been asked for
authorization on the authentication device, the result is reported with
``/backchannel/authentication/complete``.
"""

from enum import StrEnum

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, JsonText, format_summary, join
from coreason_authlete.dto.common import Property, Scope, stringify_scope_names
from coreason_authlete.types import CodedEnum, DeliveryMode, UserIdentificationHintType


class BackchannelAuthenticationRequest(AuthleteModel):
    """Request to ``/backchannel/authentication``."""

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None


class BackchannelAuthenticationResponse(ApiResponse):
    """
    Response from ``/backchannel/authentication``.

    Attributes:
        hint_type (UserIdentificationHintType | None): Which hint the request carried.
        hint (str | None): Value of the hint (``login_hint``, ``login_hint_token`` or ``id_token_hint``).
        sub (str | None): The ``sub`` claim of the ID token used as ``id_token_hint``.
        binding_message (str | None): Message to show on both the consumption and authentication devices.
        warnings (list[str] | None): Problems found in the request that did not make it fail.
        ticket (str | None): Ticket for the issue/fail APIs.
    """

    class Action(StrEnum):
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        USER_IDENTIFICATION = "USER_IDENTIFICATION"

    action: Action | None = None
    response_content: str | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    delivery_mode: DeliveryMode | None = None
    scopes: list[Scope] | None = None
    claim_names: list[str] | None = None
    client_notification_token: str | None = None
    acrs: list[str] | None = None
    hint_type: UserIdentificationHintType | None = None
    hint: str | None = None
    sub: str | None = None
    binding_message: str | None = None
    warnings: list[str] | None = None
    ticket: str | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            clientId=self.client_id,
            clientIdAlias=self.client_id_alias,
            clientIdAliasUsed=self.client_id_alias_used,
            deliveryMode=self.delivery_mode,
            scopes=stringify_scope_names(self.scopes),
            claimNames=join(self.claim_names),
            acrs=join(self.acrs),
            hintType=self.hint_type,
            hint=self.hint,
            sub=self.sub,
            bindingMessage=self.binding_message,
            ticket=self.ticket,
        )


class BackchannelAuthenticationIssueRequest(AuthleteModel):
    ticket: str | None = None


class BackchannelAuthenticationIssueResponse(ApiResponse):
    """
    Response from ``/backchannel/authentication/issue``.

    On ``OK`` the backchannel authentication endpoint returns 200 with
    ``response_content``, which carries ``auth_req_id``, ``expires_in`` and ``interval``.
    """

    class Action(StrEnum):
        OK = "OK"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        INVALID_TICKET = "INVALID_TICKET"

    action: Action | None = None
    response_content: str | None = None
    auth_req_id: str | None = None
    expires_in: int = 0
    interval: int = 0

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            authReqId=self.auth_req_id,
            expiresIn=self.expires_in,
            interval=self.interval,
        )


class BackchannelAuthenticationFailRequest(AuthleteModel):
    """Request to ``/backchannel/authentication/fail``."""

    class Reason(StrEnum):
        EXPIRED_LOGIN_HINT_TOKEN = "EXPIRED_LOGIN_HINT_TOKEN"
        UNKNOWN_USER_ID = "UNKNOWN_USER_ID"
        INVALID_USER_CODE = "INVALID_USER_CODE"
        ACCESS_DENIED = "ACCESS_DENIED"
        SERVER_ERROR = "SERVER_ERROR"

    ticket: str | None = None
    reason: Reason | None = None
    description: str | None = None
    uri: str | None = None


class BackchannelAuthenticationFailResponse(ApiResponse):
    class Action(StrEnum):
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        INVALID_TICKET = "INVALID_TICKET"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return format_summary(action=self.action, responseContent=self.response_content)


class BackchannelAuthenticationCompleteRequest(AuthleteModel):
    """
    Request to ``/backchannel/authentication/complete``.

    ``result`` reports the outcome of the end-user interaction. ``subject`` is
    required when the result is ``AUTHORIZED``. ``claims`` holds the claim values
    to embed in the ID token as a JSON object, and also accepts a dict.
    """

    class Result(CodedEnum):
        AUTHORIZED = ("AUTHORIZED", 1)
        ACCESS_DENIED = ("ACCESS_DENIED", 2)
        TRANSACTION_FAILED = ("TRANSACTION_FAILED", 3)

    ticket: str | None = None
    result: Result | None = None
    subject: str | None = None
    sub: str | None = None
    auth_time: int = 0
    acr: str | None = None
    claims: JsonText = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    error_description: str | None = None
    error_uri: str | None = None


class BackchannelAuthenticationCompleteResponse(ApiResponse):
    """
    Response from ``/backchannel/authentication/complete``.

    ``NOTIFICATION`` (ping and push modes) means the authorization server must
    POST ``response_content`` to ``client_notification_endpoint`` with
    ``client_notification_token`` as a bearer token. ``NO_ACTION`` (poll mode)
    means nothing more is to be done.
    """

    class Action(StrEnum):
        NOTIFICATION = "NOTIFICATION"
        NO_ACTION = "NO_ACTION"

    action: Action | None = None
    response_content: str | None = None
    client_notification_endpoint: str | None = None
    client_notification_token: str | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            responseContent=self.response_content,
            clientNotificationEndpoint=self.client_notification_endpoint,
        )
