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
Mirrors of the client and service objects managed by Authlete.

These objects are embedded in several responses (e.g. the authorization API
response). Only the commonly used properties are typed; every other property
sent by the server is kept as an extra field so that nothing is lost when the
object is serialized again.
"""

from pydantic import ConfigDict

from coreason_authlete.dto.base import AuthleteModel, JsonText
from coreason_authlete.dto.common import Pair, Scope, SnsCredentials, TaggedValue
from coreason_authlete.types import (
    ApplicationType,
    ClientAuthMethod,
    ClientType,
    DeliveryMode,
    Display,
    GrantType,
    JWEAlg,
    JWEEnc,
    JWSAlg,
    ResponseType,
    Sns,
    SubjectType,
)


class ClientExtension(AuthleteModel):
    """Authlete-specific client settings."""

    requestable_scopes_enabled: bool = False
    requestable_scopes: list[str] | None = None


class Client(AuthleteModel):
    """
    A client application registered in an Authlete service.
    """

    model_config = ConfigDict(extra="allow")

    number: int = 0
    service_number: int = 0
    developer: str | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_enabled: bool = False
    client_secret: str | None = None
    client_type: ClientType | None = None
    redirect_uris: list[str] | None = None
    response_types: list[ResponseType] | None = None
    grant_types: list[GrantType] | None = None
    application_type: ApplicationType | None = None
    contacts: list[str] | None = None
    client_name: str | None = None
    client_names: list[TaggedValue] | None = None
    logo_uri: str | None = None
    client_uri: str | None = None
    policy_uri: str | None = None
    tos_uri: str | None = None
    jwks_uri: str | None = None
    jwks: JsonText = None
    subject_type: SubjectType | None = None
    id_token_sign_alg: JWSAlg | None = None
    id_token_encryption_alg: JWEAlg | None = None
    id_token_encryption_enc: JWEEnc | None = None
    user_info_sign_alg: JWSAlg | None = None
    request_sign_alg: JWSAlg | None = None
    token_auth_method: ClientAuthMethod | None = None
    token_auth_sign_alg: JWSAlg | None = None
    default_max_age: int = 0
    default_acrs: list[str] | None = None
    auth_time_required: bool = False
    login_uri: str | None = None
    request_uris: list[str] | None = None
    description: str | None = None
    descriptions: list[TaggedValue] | None = None
    created_at: int = 0
    modified_at: int = 0
    extension: ClientExtension | None = None
    tls_client_certificate_bound_access_tokens: bool = False
    software_id: str | None = None
    software_version: str | None = None
    bc_delivery_mode: DeliveryMode | None = None
    bc_notification_endpoint: str | None = None
    bc_user_code_required: bool = False
    dynamically_registered: bool = False
    authorization_details_types: list[str] | None = None
    par_required: bool = False
    request_object_required: bool = False
    attributes: list[Pair] | None = None
    custom_metadata: JsonText = None
    pkce_required: bool = False
    entity_id: str | None = None
    organization_name: str | None = None


class Service(AuthleteModel):
    """
    An Authlete service, i.e. one authorization server instance.
    """

    model_config = ConfigDict(extra="allow")

    number: int = 0
    service_owner_number: int = 0
    service_name: str | None = None
    api_key: int = 0
    api_secret: str | None = None
    issuer: str | None = None
    authorization_endpoint: str | None = None
    token_endpoint: str | None = None
    revocation_endpoint: str | None = None
    user_info_endpoint: str | None = None
    jwks_uri: str | None = None
    jwks: JsonText = None
    registration_endpoint: str | None = None
    supported_scopes: list[Scope] | None = None
    supported_response_types: list[ResponseType] | None = None
    supported_grant_types: list[GrantType] | None = None
    supported_acrs: list[str] | None = None
    supported_token_auth_methods: list[ClientAuthMethod] | None = None
    supported_displays: list[Display] | None = None
    supported_claims: list[str] | None = None
    service_documentation: str | None = None
    supported_claim_locales: list[str] | None = None
    supported_ui_locales: list[str] | None = None
    policy_uri: str | None = None
    tos_uri: str | None = None
    authentication_callback_endpoint: str | None = None
    supported_snses: list[Sns] | None = None
    sns_credentials: list[SnsCredentials] | None = None
    created_at: int = 0
    modified_at: int = 0
    clients_per_developer: int = 0
    direct_authorization_endpoint_enabled: bool = False
    direct_token_endpoint_enabled: bool = False
    direct_revocation_endpoint_enabled: bool = False
    direct_user_info_endpoint_enabled: bool = False
    direct_jwks_endpoint_enabled: bool = False
    single_access_token_per_subject: bool = False
    pkce_required: bool = False
    refresh_token_kept: bool = False
    description: str | None = None
    access_token_type: str | None = None
    access_token_duration: int = 0
    refresh_token_duration: int = 0
    id_token_duration: int = 0
    metadata: list[Pair] | None = None
