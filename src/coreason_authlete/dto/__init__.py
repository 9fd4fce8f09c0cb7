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
Request, response and value objects of the Authlete API.
"""

from .base import (
    ApiResponse,
    AuthleteModel,
    JsonText,
)
from .common import (
    AccessToken,
    Address,
    AuthzDetails,
    AuthzDetailsElement,
    ClaimMatcher,
    ClaimRule,
    DynamicScope,
    Grant,
    GrantScope,
    Pair,
    Property,
    Scope,
    SnsCredentials,
    StringArray,
    TaggedValue,
    TokenInfo,
    stringify_properties,
    stringify_scope_names,
)
from .client import (
    Client,
    ClientExtension,
    Service,
)
from .authorization import (
    AuthorizationFailRequest,
    AuthorizationFailResponse,
    AuthorizationIssueRequest,
    AuthorizationIssueResponse,
    AuthorizationRequest,
    AuthorizationResponse,
)
from .token import (
    TokenCreateRequest,
    TokenCreateResponse,
    TokenFailRequest,
    TokenFailResponse,
    TokenIssueRequest,
    TokenIssueResponse,
    TokenListResponse,
    TokenRequest,
    TokenResponse,
    TokenRevokeRequest,
    TokenRevokeResponse,
    TokenUpdateRequest,
    TokenUpdateResponse,
)
from .introspection import (
    IntrospectionRequest,
    IntrospectionResponse,
    StandardIntrospectionRequest,
    StandardIntrospectionResponse,
)
from .userinfo import (
    UserInfoIssueRequest,
    UserInfoIssueResponse,
    UserInfoRequest,
    UserInfoResponse,
)
from .backchannel import (
    BackchannelAuthenticationCompleteRequest,
    BackchannelAuthenticationCompleteResponse,
    BackchannelAuthenticationFailRequest,
    BackchannelAuthenticationFailResponse,
    BackchannelAuthenticationIssueRequest,
    BackchannelAuthenticationIssueResponse,
    BackchannelAuthenticationRequest,
    BackchannelAuthenticationResponse,
)
from .device import (
    CimdOptions,
    DeviceAuthorizationRequest,
    DeviceAuthorizationResponse,
    DeviceCompleteRequest,
    DeviceCompleteResponse,
    DeviceVerificationRequest,
    DeviceVerificationResponse,
)
from .pushed_auth import (
    PushedAuthReqRequest,
    PushedAuthReqResponse,
    RevocationRequest,
    RevocationResponse,
)
from .credential import (
    CredentialBatchIssueRequest,
    CredentialBatchIssueResponse,
    CredentialBatchParseRequest,
    CredentialBatchParseResponse,
    CredentialDeferredIssueRequest,
    CredentialDeferredIssueResponse,
    CredentialDeferredParseRequest,
    CredentialDeferredParseResponse,
    CredentialIssuanceOrder,
    CredentialIssuerJwksRequest,
    CredentialIssuerJwksResponse,
    CredentialIssuerMetadata,
    CredentialIssuerMetadataRequest,
    CredentialIssuerMetadataResponse,
    CredentialJwtIssuerMetadataRequest,
    CredentialJwtIssuerMetadataResponse,
    CredentialNonceRequest,
    CredentialNonceResponse,
    CredentialOfferCreateRequest,
    CredentialOfferCreateResponse,
    CredentialOfferInfo,
    CredentialOfferInfoRequest,
    CredentialOfferInfoResponse,
    CredentialRequestInfo,
    CredentialSingleIssueRequest,
    CredentialSingleIssueResponse,
    CredentialSingleParseRequest,
    CredentialSingleParseResponse,
    cbor_bytes,
    cbor_full_date,
)

__all__ = [
    "AccessToken",
    "Address",
    "ApiResponse",
    "AuthleteModel",
    "AuthorizationFailRequest",
    "AuthorizationFailResponse",
    "AuthorizationIssueRequest",
    "AuthorizationIssueResponse",
    "AuthorizationRequest",
    "AuthorizationResponse",
    "AuthzDetails",
    "AuthzDetailsElement",
    "BackchannelAuthenticationCompleteRequest",
    "BackchannelAuthenticationCompleteResponse",
    "BackchannelAuthenticationFailRequest",
    "BackchannelAuthenticationFailResponse",
    "BackchannelAuthenticationIssueRequest",
    "BackchannelAuthenticationIssueResponse",
    "BackchannelAuthenticationRequest",
    "BackchannelAuthenticationResponse",
    "CimdOptions",
    "ClaimMatcher",
    "ClaimRule",
    "Client",
    "ClientExtension",
    "CredentialBatchIssueRequest",
    "CredentialBatchIssueResponse",
    "CredentialBatchParseRequest",
    "CredentialBatchParseResponse",
    "CredentialDeferredIssueRequest",
    "CredentialDeferredIssueResponse",
    "CredentialDeferredParseRequest",
    "CredentialDeferredParseResponse",
    "CredentialIssuanceOrder",
    "CredentialIssuerJwksRequest",
    "CredentialIssuerJwksResponse",
    "CredentialIssuerMetadata",
    "CredentialIssuerMetadataRequest",
    "CredentialIssuerMetadataResponse",
    "CredentialJwtIssuerMetadataRequest",
    "CredentialJwtIssuerMetadataResponse",
    "CredentialNonceRequest",
    "CredentialNonceResponse",
    "CredentialOfferCreateRequest",
    "CredentialOfferCreateResponse",
    "CredentialOfferInfo",
    "CredentialOfferInfoRequest",
    "CredentialOfferInfoResponse",
    "CredentialRequestInfo",
    "CredentialSingleIssueRequest",
    "CredentialSingleIssueResponse",
    "CredentialSingleParseRequest",
    "CredentialSingleParseResponse",
    "DeviceAuthorizationRequest",
    "DeviceAuthorizationResponse",
    "DeviceCompleteRequest",
    "DeviceCompleteResponse",
    "DeviceVerificationRequest",
    "DeviceVerificationResponse",
    "DynamicScope",
    "Grant",
    "GrantScope",
    "IntrospectionRequest",
    "IntrospectionResponse",
    "JsonText",
    "Pair",
    "Property",
    "PushedAuthReqRequest",
    "PushedAuthReqResponse",
    "RevocationRequest",
    "RevocationResponse",
    "Scope",
    "Service",
    "SnsCredentials",
    "StandardIntrospectionRequest",
    "StandardIntrospectionResponse",
    "StringArray",
    "TaggedValue",
    "TokenCreateRequest",
    "TokenCreateResponse",
    "TokenFailRequest",
    "TokenFailResponse",
    "TokenInfo",
    "TokenIssueRequest",
    "TokenIssueResponse",
    "TokenListResponse",
    "TokenRequest",
    "TokenResponse",
    "TokenRevokeRequest",
    "TokenRevokeResponse",
    "TokenUpdateRequest",
    "TokenUpdateResponse",
    "UserInfoIssueRequest",
    "UserInfoIssueResponse",
    "UserInfoRequest",
    "UserInfoResponse",
    "cbor_bytes",
    "cbor_full_date",
    "stringify_properties",
    "stringify_scope_names",
]
