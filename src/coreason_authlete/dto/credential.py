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
DTOs of the OpenID for Verifiable Credential Issuance (OID4VCI) APIs.

A credential issuer serves its metadata through ``/vci/metadata``,
``/vci/jwtissuer`` and ``/vci/jwks``, publishes credential offers with
``/vci/offer/create``, and handles credential requests by parsing them with
``/vci/{single,batch,deferred}/parse`` and answering them with
``/vci/{single,batch,deferred}/issue``.
"""

import datetime
from enum import StrEnum
from typing import Any

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, JsonText, format_summary, parse_json_text
from coreason_authlete.dto.common import Property
from coreason_authlete.exceptions import JsonFormatError, MetadataFormatError
from coreason_authlete.types import JWEAlg, JWEEnc

CBOR_PREFIX = "cbor:"
CBOR_TAG_FULL_DATE = 1004


def cbor_full_date(value: datetime.date | str) -> str:
    """
    Builds a claim value that Authlete converts to a CBOR ``full-date`` (tag 1004, RFC 8943).

    Example:
        >>> cbor_full_date(datetime.date(2024, 10, 20))
        'cbor:1004("2024-10-20")'
    """
    text = value.isoformat() if isinstance(value, datetime.date) else value
    return f'{CBOR_PREFIX}{CBOR_TAG_FULL_DATE}("{text}")'


def cbor_bytes(data: bytes) -> str:
    """
    Builds a claim value that Authlete converts to a CBOR byte string, e.g. a portrait image.

    Example:
        >>> cbor_bytes(b"\\x12\\x34")
        "cbor:h'1234'"
    """
    return f"{CBOR_PREFIX}h'{data.hex()}'"


class CredentialIssuerMetadata(AuthleteModel):
    """
    Credential issuer metadata (OID4VCI, 11.2).

    ``credentials_supported`` holds a JSON array or object describing the
    supported credential configurations, and ``display`` holds a JSON array of
    display properties. ``credential_request_encryption_jwks`` holds a JWK Set
    as a JSON object. All three also accept structured values.
    """

    credential_issuer: str | None = None
    authorization_servers: list[str] | None = None
    credential_endpoint: str | None = None
    batch_credential_endpoint: str | None = None
    deferred_credential_endpoint: str | None = None
    nonce_endpoint: str | None = None
    notification_endpoint: str | None = None
    credentials_supported: JsonText = None
    credential_response_encryption_alg_values_supported: list[JWEAlg] | None = None
    credential_response_encryption_enc_values_supported: list[JWEEnc] | None = None
    require_credential_response_encryption: bool = False
    credential_request_encryption_jwks: JsonText = None
    credential_request_encryption_enc_values_supported: list[JWEEnc] | None = None
    require_credential_request_encryption: bool = False
    batch_size: int = 0
    display: JsonText = None

    def is_empty(self) -> bool:
        """True when no property holds a value."""
        return not any(getattr(self, name) for name in type(self).model_fields)

    def to_map(self) -> dict[str, Any]:
        """
        Builds the metadata document in its standard JSON form.

        Keys appear in a fixed order and only when the backing property holds a
        value. Embedded JSON properties are parsed into structured values.

        Returns:
            dict[str, Any]: The metadata document.

        Raises:
            MetadataFormatError: If an embedded JSON property is not valid JSON,
                or is not of the expected JSON type.
        """
        result: dict[str, Any] = {}

        _put(result, "credential_issuer", self.credential_issuer)
        _put(result, "authorization_servers", self.authorization_servers)
        _put(result, "credential_endpoint", self.credential_endpoint)
        _put(result, "batch_credential_endpoint", self.batch_credential_endpoint)
        _put(result, "deferred_credential_endpoint", self.deferred_credential_endpoint)
        _put(result, "nonce_endpoint", self.nonce_endpoint)
        _put(result, "notification_endpoint", self.notification_endpoint)

        algs = self.credential_response_encryption_alg_values_supported
        encs = self.credential_response_encryption_enc_values_supported
        if algs and encs:
            result["credential_response_encryption"] = {
                "alg_values_supported": [alg.value for alg in algs],
                "enc_values_supported": [enc.value for enc in encs],
                "encryption_required": self.require_credential_response_encryption,
            }

        jwks = self.credential_request_encryption_jwks
        request_encs = self.credential_request_encryption_enc_values_supported
        if jwks and request_encs:
            result["credential_request_encryption"] = {
                "jwks": _parse_metadata_json(jwks, "credentialRequestEncryptionJwks", dict),
                "enc_values_supported": [enc.value for enc in request_encs],
                "encryption_required": self.require_credential_request_encryption,
            }

        if self.batch_size > 0:
            result["batch_credential_issuance"] = {"batch_size": self.batch_size}

        if self.credentials_supported:
            result["credentials_supported"] = _parse_metadata_json(
                self.credentials_supported, "credentialsSupported", (list, dict)
            )

        if self.display:
            result["display"] = _parse_metadata_json(self.display, "display", list)

        return result


def _put(result: dict[str, Any], key: str, value: Any) -> None:
    if value:
        result[key] = value


def _parse_metadata_json(text: str, name: str, expected: type | tuple[type, ...]) -> Any:
    try:
        return parse_json_text(text, name, expected)
    except JsonFormatError as e:
        raise MetadataFormatError(f"The value of the '{name}' property failed to be parsed: {e}") from e


class CredentialIssuerMetadataRequest(AuthleteModel):
    pretty: bool = False


class CredentialIssuerMetadataResponse(ApiResponse):
    """
    Response from ``/vci/metadata``.

    On ``OK`` the credential issuer metadata endpoint returns 200 with
    ``response_content`` as the JSON metadata document.
    """

    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return format_summary(action=self.action, responseContent=self.response_content)


class CredentialJwtIssuerMetadataRequest(AuthleteModel):
    pretty: bool = False


class CredentialJwtIssuerMetadataResponse(ApiResponse):
    """Response from ``/vci/jwtissuer`` (the ``/.well-known/jwt-vc-issuer`` document)."""

    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None


class CredentialIssuerJwksRequest(AuthleteModel):
    pretty: bool = False


class CredentialIssuerJwksResponse(ApiResponse):
    """Response from ``/vci/jwks``; on ``OK``, ``response_content`` is the issuer's public JWK Set."""

    class Action(StrEnum):
        OK = "OK"
        NOT_FOUND = "NOT_FOUND"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None


class CredentialNonceRequest(AuthleteModel):
    pretty: bool = False


class CredentialNonceResponse(ApiResponse):
    """Response from ``/vci/nonce``; on ``OK``, ``response_content`` carries ``c_nonce``."""

    class Action(StrEnum):
        OK = "OK"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    nonce: str | None = None
    expires_at: int = 0


class CredentialOfferInfo(AuthleteModel):
    """
    A credential offer managed by Authlete.

    Attributes:
        identifier (str | None): The identifier of the offer.
        credential_offer (str | None): The credential offer as JSON.
        credential_issuer (str | None): The identifier of the credential issuer.
        credential_configurations (list[str] | None): The offered credential configuration IDs.
        authorization_code_grant_included (bool): Whether the ``authorization_code`` grant is offered.
        issuer_state_included (bool): Whether ``issuer_state`` is included in that grant.
        issuer_state (str | None): The value of ``issuer_state``.
        pre_authorized_code_grant_included (bool): Whether the pre-authorized code grant is offered.
        pre_authorized_code (str | None): The pre-authorized code.
        subject (str | None): The subject the offer was created for.
        expires_at (int): Expiry time in milliseconds since the Unix epoch.
        context (str | None): Arbitrary context of the offer.
        properties (list[Property] | None): Properties attached to access tokens issued for the offer.
        jwt_at_claims (str | None): Extra claims of JWT access tokens, as a JSON object.
        auth_time (int): Time of end-user authentication in seconds since the Unix epoch.
        acr (str | None): The authentication context class reference.
        tx_code (str | None): The transaction code bound to the pre-authorized code.
        tx_code_input_mode (str | None): Input mode of the transaction code (``numeric`` or ``text``).
        tx_code_description (str | None): Description of the transaction code shown to the end-user.
    """

    identifier: str | None = None
    credential_offer: str | None = None
    credential_issuer: str | None = None
    credential_configurations: list[str] | None = None
    authorization_code_grant_included: bool = False
    issuer_state_included: bool = False
    issuer_state: str | None = None
    pre_authorized_code_grant_included: bool = False
    pre_authorized_code: str | None = None
    subject: str | None = None
    expires_at: int = 0
    context: str | None = None
    properties: list[Property] | None = None
    jwt_at_claims: JsonText = None
    auth_time: int = 0
    acr: str | None = None
    tx_code: str | None = None
    tx_code_input_mode: str | None = None
    tx_code_description: str | None = None


class CredentialOfferCreateRequest(AuthleteModel):
    """Request to ``/vci/offer/create``."""

    credential_configurations: list[str] | None = None
    authorization_code_grant_included: bool = False
    issuer_state_included: bool = False
    pre_authorized_code_grant_included: bool = False
    subject: str | None = None
    duration: int = 0
    context: str | None = None
    properties: list[Property] | None = None
    jwt_at_claims: JsonText = None
    auth_time: int = 0
    acr: str | None = None
    tx_code: str | None = None
    tx_code_input_mode: str | None = None
    tx_code_description: str | None = None


class CredentialOfferCreateResponse(ApiResponse):
    class Action(StrEnum):
        CREATED = "CREATED"
        FORBIDDEN = "FORBIDDEN"
        CALLER_ERROR = "CALLER_ERROR"
        AUTHLETE_ERROR = "AUTHLETE_ERROR"

    action: Action | None = None
    info: CredentialOfferInfo | None = None


class CredentialOfferInfoRequest(AuthleteModel):
    identifier: str | None = None


class CredentialOfferInfoResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        CALLER_ERROR = "CALLER_ERROR"
        AUTHLETE_ERROR = "AUTHLETE_ERROR"

    action: Action | None = None
    info: CredentialOfferInfo | None = None


class CredentialRequestInfo(AuthleteModel):
    """
    Parsed credential request.

    Attributes:
        identifier (str | None): Identifier of the request, used later as
            ``CredentialIssuanceOrder.request_identifier``.
        format (str | None): The credential format (e.g. ``vc+sd-jwt``, ``mso_mdoc``).
        binding_key (str | None): The public key the credential is bound to, as a JWK.
        details (str | None): The rest of the request as JSON.
    """

    identifier: str | None = None
    format: str | None = None
    binding_key: str | None = None
    details: str | None = None


class CredentialIssuanceOrder(AuthleteModel):
    """
    Instruction to issue one credential.

    ``credential_payload`` holds the claims of the credential as a JSON object
    and also accepts a dict. For ``mso_mdoc`` credentials, claim values that
    JSON cannot express are written with :func:`cbor_full_date` and
    :func:`cbor_bytes`.

    Example:
        order = CredentialIssuanceOrder().set(
            request_identifier=info.identifier,
            credential_payload={"doctype": "org.iso.18013.5.1.mDL", "claims": claims},
        )
    """

    request_identifier: str | None = None
    credential_payload: JsonText = None
    issuance_deferred: bool = False
    credential_duration: int = 0
    signing_key_id: str | None = None

    def summarize(self) -> str:
        return format_summary(
            requestIdentifier=self.request_identifier,
            credentialPayload=self.credential_payload,
            issuanceDeferred=self.issuance_deferred,
            credentialDuration=self.credential_duration,
            signingKeyId=self.signing_key_id,
        )


class CredentialSingleParseRequest(AuthleteModel):
    """Request to ``/vci/single/parse``: the access token and the body of the credential request."""

    access_token: str | None = None
    request_content: str | None = None


class CredentialSingleParseResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    info: CredentialRequestInfo | None = None


class CredentialSingleIssueRequest(AuthleteModel):
    access_token: str | None = None
    order: CredentialIssuanceOrder | None = None


class CredentialSingleIssueResponse(ApiResponse):
    """
    Response from ``/vci/single/issue``.

    ``OK`` and ``ACCEPTED`` (deferred issuance, with ``transaction_id``) carry a
    JSON response; the ``_JWT`` variants carry an encrypted one. ``CALLER_ERROR``
    means the order itself was wrong.
    """

    class Action(StrEnum):
        OK = "OK"
        OK_JWT = "OK_JWT"
        ACCEPTED = "ACCEPTED"
        ACCEPTED_JWT = "ACCEPTED_JWT"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    transaction_id: str | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            responseContent=self.response_content,
            transactionId=self.transaction_id,
        )


class CredentialBatchParseRequest(AuthleteModel):
    access_token: str | None = None
    request_content: str | None = None


class CredentialBatchParseResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    info: list[CredentialRequestInfo] | None = None


class CredentialBatchIssueRequest(AuthleteModel):
    access_token: str | None = None
    orders: list[CredentialIssuanceOrder] | None = None


class CredentialBatchIssueResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        OK_JWT = "OK_JWT"
        ACCEPTED = "ACCEPTED"
        ACCEPTED_JWT = "ACCEPTED_JWT"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    action: Action | None = None
    response_content: str | None = None


class CredentialDeferredParseRequest(AuthleteModel):
    access_token: str | None = None
    request_content: str | None = None


class CredentialDeferredParseResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    action: Action | None = None
    response_content: str | None = None
    info: CredentialRequestInfo | None = None


class CredentialDeferredIssueRequest(AuthleteModel):
    order: CredentialIssuanceOrder | None = None


class CredentialDeferredIssueResponse(ApiResponse):
    class Action(StrEnum):
        OK = "OK"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        CALLER_ERROR = "CALLER_ERROR"

    action: Action | None = None
    response_content: str | None = None
