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
DTOs of the token endpoint APIs and the token management APIs.
"""

from enum import StrEnum

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, JsonText, format_summary, join
from coreason_authlete.dto.client import Client
from coreason_authlete.dto.common import AccessToken, AuthzDetails, Pair, Property, TokenInfo, stringify_properties
from coreason_authlete.types import ClientAuthMethod, GrantType, TokenType


class TokenRequest(AuthleteModel):
    """
    Request to ``/auth/token``.

    Attributes:
        parameters (str | None): The token request body, as received by the token endpoint.
        client_id (str | None): Client ID from the ``Authorization`` header (Basic auth), if any.
        client_secret (str | None): Client secret from the ``Authorization`` header, if any.
        client_certificate (str | None): PEM client certificate used in mutual TLS.
        client_certificate_path (list[str] | None): Intermediate certificates in PEM.
        properties (list[Property] | None): Extra properties attached to the access token.
        dpop (str | None): The ``DPoP`` header value.
        htm (str | None): HTTP method of the token request, for DPoP proof verification.
        htu (str | None): URL of the token endpoint, for DPoP proof verification.
        jwt_at_claims (str | None): Extra claims of a JWT access token, as a JSON object.
        access_token (str | None): A pre-generated access token value.
        access_token_duration (int): Duration of the access token in seconds; 0 uses the default.
        dpop_nonce_required (bool): Whether a server-provided DPoP nonce is required.
    """

    parameters: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    properties: list[Property] | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    jwt_at_claims: JsonText = None
    access_token: str | None = None
    access_token_duration: int = 0
    dpop_nonce_required: bool = False


class TokenResponse(ApiResponse):
    """
    Response from ``/auth/token``.

    ``PASSWORD`` means the request used the Resource Owner Password Credentials
    flow: validate ``username`` and ``password``, then call ``/auth/token/issue``
    or ``/auth/token/fail`` with ``ticket``. ``TOKEN_EXCHANGE`` and ``JWT_BEARER``
    require the authorization server to finish the grant itself.
    """

    class Action(StrEnum):
        INVALID_CLIENT = "INVALID_CLIENT"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        PASSWORD = "PASSWORD"
        OK = "OK"
        TOKEN_EXCHANGE = "TOKEN_EXCHANGE"
        JWT_BEARER = "JWT_BEARER"

    action: Action | None = None
    response_content: str | None = None
    username: str | None = None
    password: str | None = None
    ticket: str | None = None
    access_token: str | None = None
    access_token_expires_at: int = 0
    access_token_duration: int = 0
    refresh_token: str | None = None
    refresh_token_expires_at: int = 0
    refresh_token_duration: int = 0
    id_token: str | None = None
    grant_type: GrantType | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    subject: str | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    jwt_access_token: str | None = None
    client_auth_method: ClientAuthMethod | None = None
    resources: list[str] | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    grant_id: str | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
    audiences: list[str] | None = None
    requested_token_type: TokenType | None = None
    subject_token: str | None = None
    subject_token_type: TokenType | None = None
    subject_token_info: TokenInfo | None = None
    actor_token: str | None = None
    actor_token_type: TokenType | None = None
    actor_token_info: TokenInfo | None = None
    assertion: str | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            username=self.username,
            password=self.password,
            ticket=self.ticket,
            responseContent=self.response_content,
            accessToken=self.access_token,
            accessTokenExpiresAt=self.access_token_expires_at,
            accessTokenDuration=self.access_token_duration,
            refreshToken=self.refresh_token,
            refreshTokenExpiresAt=self.refresh_token_expires_at,
            refreshTokenDuration=self.refresh_token_duration,
            idToken=self.id_token,
            grantType=self.grant_type,
            clientId=self.client_id,
            clientIdAlias=self.client_id_alias,
            clientIdAliasUsed=self.client_id_alias_used,
            subject=self.subject,
            scopes=join(self.scopes),
            properties=stringify_properties(self.properties),
            jwtAccessToken=self.jwt_access_token,
            clientAuthMethod=self.client_auth_method,
        )


class TokenIssueRequest(AuthleteModel):
    """Request to ``/auth/token/issue``, sent after the resource owner credentials were verified."""

    ticket: str | None = None
    subject: str | None = None
    properties: list[Property] | None = None
    jwt_at_claims: JsonText = None


class TokenIssueResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        OK = "OK"

    action: Action | None = None
    response_content: str | None = None
    access_token: str | None = None
    access_token_expires_at: int = 0
    access_token_duration: int = 0
    refresh_token: str | None = None
    refresh_token_expires_at: int = 0
    refresh_token_duration: int = 0
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    subject: str | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    jwt_access_token: str | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            responseContent=self.response_content,
            accessToken=self.access_token,
            accessTokenExpiresAt=self.access_token_expires_at,
            accessTokenDuration=self.access_token_duration,
            refreshToken=self.refresh_token,
            refreshTokenExpiresAt=self.refresh_token_expires_at,
            refreshTokenDuration=self.refresh_token_duration,
            clientId=self.client_id,
            clientIdAlias=self.client_id_alias,
            clientIdAliasUsed=self.client_id_alias_used,
            subject=self.subject,
            scopes=join(self.scopes),
            properties=stringify_properties(self.properties),
            jwtAccessToken=self.jwt_access_token,
        )


class TokenFailRequest(AuthleteModel):
    """Request to ``/auth/token/fail``."""

    class Reason(StrEnum):
        UNKNOWN = "UNKNOWN"
        INVALID_RESOURCE_OWNER_CREDENTIALS = "INVALID_RESOURCE_OWNER_CREDENTIALS"
        INVALID_TARGET = "INVALID_TARGET"

    ticket: str | None = None
    reason: Reason | None = None


class TokenFailResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return format_summary(action=self.action, responseContent=self.response_content)


class TokenCreateRequest(AuthleteModel):
    """
    Request to ``/auth/token/create``.

    Creates an access token directly, without going through the token endpoint.
    Only ``AUTHORIZATION_CODE``, ``IMPLICIT``, ``PASSWORD``, ``CLIENT_CREDENTIALS``
    and ``REFRESH_TOKEN`` are accepted as ``grant_type``, and ``subject`` is required
    unless the grant type is ``CLIENT_CREDENTIALS``. The server enforces both rules.

    Example:
        >>> TokenCreateRequest().set(grant_type=GrantType.CLIENT_CREDENTIALS, client_id=12345).to_json()
        '{"grantType":"client_credentials","clientId":12345}'
    """

    grant_type: GrantType | None = None
    client_id: int = 0
    subject: str | None = None
    scopes: list[str] | None = None
    access_token_duration: int = 0
    refresh_token_duration: int = 0
    properties: list[Property] | None = None
    client_id_alias_used: bool = False
    access_token: str | None = None
    refresh_token: str | None = None
    access_token_persistent: bool = False
    certificate_thumbprint: str | None = None
    dpop_key_thumbprint: str | None = None
    authorization_details: AuthzDetails | None = None
    resources: list[str] | None = None


class TokenCreateResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        OK = "OK"

    action: Action | None = None
    grant_type: GrantType | None = None
    client_id: int = 0
    subject: str | None = None
    scopes: list[str] | None = None
    access_token: str | None = None
    token_type: str | None = None
    expires_in: int = 0
    expires_at: int = 0
    refresh_token: str | None = None
    properties: list[Property] | None = None
    authorization_details: AuthzDetails | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            grantType=self.grant_type,
            clientId=self.client_id,
            subject=self.subject,
            scopes=join(self.scopes),
            accessToken=self.access_token,
            tokenType=self.token_type,
            expiresIn=self.expires_in,
            expiresAt=self.expires_at,
            refreshToken=self.refresh_token,
        )


class TokenUpdateRequest(AuthleteModel):
    """Request to ``/auth/token/update``: changes the expiry, scopes or properties of an access token."""

    access_token: str | None = None
    access_token_expires_at: int = 0
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    update_access_token_expires_at_on_scope_update: bool = False


class TokenUpdateResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        OK = "OK"

    action: Action | None = None
    access_token: str | None = None
    token_type: str | None = None
    access_token_expires_at: int = 0
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    authorization_details: AuthzDetails | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            accessToken=self.access_token,
            accessTokenExpiresAt=self.access_token_expires_at,
            scopes=join(self.scopes),
            tokenType=self.token_type,
        )


class TokenRevokeRequest(AuthleteModel):
    """
    Request to ``/auth/token/revoke``.

    Either a single token is identified (by its value or hash), or every token
    matching ``client_identifier`` and/or ``subject`` is revoked.
    """

    access_token_identifier: str | None = None
    refresh_token_identifier: str | None = None
    client_identifier: str | None = None
    subject: str | None = None


class TokenRevokeResponse(ApiResponse):
    count: int = 0


class TokenListResponse(ApiResponse):
    """
    Response from ``/auth/token/get/list``.

    Attributes:
        start (int): Start index (inclusive) of the page.
        end (int): End index (exclusive) of the page.
        client (Client | None): The client the list was filtered by, if any.
        subject (str | None): The subject the list was filtered by, if any.
        total_count (int): Total number of matching tokens.
        access_tokens (list[AccessToken] | None): The tokens of this page.
    """

    start: int = 0
    end: int = 0
    client: Client | None = None
    subject: str | None = None
    total_count: int = 0
    access_tokens: list[AccessToken] | None = None
