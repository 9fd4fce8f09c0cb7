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
DTOs of the UserInfo endpoint APIs.
"""

from enum import StrEnum

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, JsonText, format_summary, join
from coreason_authlete.dto.common import Property, stringify_properties


class UserInfoRequest(AuthleteModel):
    """
    Request to ``/auth/userinfo``.

    Attributes:
        token (str | None): The access token presented to the UserInfo endpoint.
        client_certificate (str | None): Client certificate for certificate-bound tokens.
        dpop (str | None): The ``DPoP`` header of the UserInfo request.
        htm (str | None): HTTP method of the UserInfo request.
        htu (str | None): URL of the UserInfo endpoint.
    """

    token: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None


class UserInfoResponse(ApiResponse):
    """
    Response from ``/auth/userinfo``.

    On ``OK``, collect the values of ``claims`` for ``subject`` and call
    ``/auth/userinfo/issue``.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        OK = "OK"

    action: Action | None = None
    client_id: int = 0
    subject: str | None = None
    scopes: list[str] | None = None
    claims: list[str] | None = None
    token: str | None = None
    response_content: str | None = None
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    user_info_claims: str | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            clientId=self.client_id,
            subject=self.subject,
            scopes=join(self.scopes),
            claims=join(self.claims),
            accessToken=self.token,
            properties=stringify_properties(self.properties),
            clientIdAlias=self.client_id_alias,
            clientIdAliasUsed=self.client_id_alias_used,
        )


class UserInfoIssueRequest(AuthleteModel):
    """
    Request to ``/auth/userinfo/issue``.

    ``claims`` and ``claims_for_tx`` hold JSON objects and also accept dicts.
    """

    token: str | None = None
    claims: JsonText = None
    sub: str | None = None
    claims_for_tx: JsonText = None
    verified_claims_for_tx: list[str] | None = None


class UserInfoIssueResponse(ApiResponse):
    """
    Response from ``/auth/userinfo/issue``.

    ``JSON`` and ``JWT`` carry the UserInfo response in ``response_content``.
    The signature fields are set when the response is signed as an HTTP message
    (RFC 9421).
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        JSON = "JSON"
        JWT = "JWT"

    action: Action | None = None
    response_content: str | None = None
    signature: str | None = None
    signature_input: str | None = None
    content_digest: str | None = None

    def summarize(self) -> str:
        return format_summary(action=self.action, responseContent=self.response_content)
