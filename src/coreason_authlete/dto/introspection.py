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
DTOs of the introspection APIs.

``/auth/introspection`` is the Authlete-specific API a resource server uses to
validate an access token. ``/auth/introspection/standard`` implements the
RFC 7662 introspection endpoint.
"""

from enum import StrEnum

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, format_summary, join
from coreason_authlete.dto.common import AuthzDetails, Grant, Pair, Property, Scope, stringify_properties
from coreason_authlete.types import GrantType


class IntrospectionRequest(AuthleteModel):
    """
    Request to ``/auth/introspection``.

    Attributes:
        token (str | None): The access token to introspect.
        scopes (list[str] | None): Scopes the protected resource requires.
        subject (str | None): Subject the access token must have been issued to.
        client_certificate (str | None): Client certificate for certificate-bound tokens.
        dpop (str | None): The ``DPoP`` header of the resource request.
        htm (str | None): HTTP method of the resource request.
        htu (str | None): URL of the protected resource.
        resources (list[str] | None): Resources the access token must cover (RFC 8707).
    """

    token: str | None = None
    scopes: list[str] | None = None
    subject: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    resources: list[str] | None = None


class IntrospectionResponse(ApiResponse):
    """
    Response from ``/auth/introspection``.

    Only ``OK`` allows access to the protected resource. On every other action
    the resource server should return ``response_content`` as the value of the
    ``WWW-Authenticate`` header.
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
    scope_details: list[Scope] | None = None
    existent: bool = False
    usable: bool = False
    sufficient: bool = False
    refreshable: bool = False
    response_content: str | None = None
    expires_at: int = 0
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_entity_id: str | None = None
    client_entity_id_used: bool = False
    certificate_thumbprint: str | None = None
    resources: list[str] | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    grant_id: str | None = None
    grant: Grant | None = None
    consented_claims: list[str] | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
    for_external_attachment: bool = False
    acr: str | None = None
    auth_time: int = 0
    grant_type: GrantType | None = None
    for_credential_issuance: bool = False
    credentials: str | None = None
    c_nonce: str | None = None
    c_nonce_expires_at: int = 0

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            clientId=self.client_id,
            subject=self.subject,
            existent=self.existent,
            usable=self.usable,
            sufficient=self.sufficient,
            refreshable=self.refreshable,
            expiresAt=self.expires_at,
            scopes=join(self.scopes),
            properties=stringify_properties(self.properties),
            clientIdAlias=self.client_id_alias,
            clientIdAliasUsed=self.client_id_alias_used,
            confirmation=self.certificate_thumbprint,
        )


class StandardIntrospectionRequest(AuthleteModel):
    """Request to ``/auth/introspection/standard``; ``parameters`` is the RFC 7662 request body."""

    parameters: str | None = None


class StandardIntrospectionResponse(ApiResponse):
    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        OK = "OK"
        JWT = "JWT"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return format_summary(action=self.action, responseContent=self.response_content)
