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
Client for the Authlete API.

``AuthleteApiAsync`` sends request DTOs to Authlete and parses the replies into
response DTOs. ``AuthleteApi`` exposes the same calls to synchronous code.
"""

import threading
from collections.abc import Awaitable, Callable
from contextlib import AbstractContextManager
from typing import Any, TypeVar

import httpx
from anyio.from_thread import BlockingPortal, start_blocking_portal
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from pydantic import ValidationError

from coreason_authlete.config import ApiVersion, AuthleteConfig
from coreason_authlete.dto.authorization import (
    AuthorizationFailRequest,
    AuthorizationFailResponse,
    AuthorizationIssueRequest,
    AuthorizationIssueResponse,
    AuthorizationRequest,
    AuthorizationResponse,
)
from coreason_authlete.dto.backchannel import (
    BackchannelAuthenticationCompleteRequest,
    BackchannelAuthenticationCompleteResponse,
    BackchannelAuthenticationFailRequest,
    BackchannelAuthenticationFailResponse,
    BackchannelAuthenticationIssueRequest,
    BackchannelAuthenticationIssueResponse,
    BackchannelAuthenticationRequest,
    BackchannelAuthenticationResponse,
)
from coreason_authlete.dto.base import ApiResponse, AuthleteModel
from coreason_authlete.dto.credential import (
    CredentialBatchIssueRequest,
    CredentialBatchIssueResponse,
    CredentialBatchParseRequest,
    CredentialBatchParseResponse,
    CredentialDeferredIssueRequest,
    CredentialDeferredIssueResponse,
    CredentialDeferredParseRequest,
    CredentialDeferredParseResponse,
    CredentialIssuerJwksRequest,
    CredentialIssuerJwksResponse,
    CredentialIssuerMetadataRequest,
    CredentialIssuerMetadataResponse,
    CredentialJwtIssuerMetadataRequest,
    CredentialJwtIssuerMetadataResponse,
    CredentialNonceRequest,
    CredentialNonceResponse,
    CredentialOfferCreateRequest,
    CredentialOfferCreateResponse,
    CredentialOfferInfoRequest,
    CredentialOfferInfoResponse,
    CredentialSingleIssueRequest,
    CredentialSingleIssueResponse,
    CredentialSingleParseRequest,
    CredentialSingleParseResponse,
)
from coreason_authlete.dto.device import (
    DeviceAuthorizationRequest,
    DeviceAuthorizationResponse,
    DeviceCompleteRequest,
    DeviceCompleteResponse,
    DeviceVerificationRequest,
    DeviceVerificationResponse,
)
from coreason_authlete.dto.introspection import (
    IntrospectionRequest,
    IntrospectionResponse,
    StandardIntrospectionRequest,
    StandardIntrospectionResponse,
)
from coreason_authlete.dto.pushed_auth import (
    PushedAuthReqRequest,
    PushedAuthReqResponse,
    RevocationRequest,
    RevocationResponse,
)
from coreason_authlete.dto.token import (
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
from coreason_authlete.dto.userinfo import (
    UserInfoIssueRequest,
    UserInfoIssueResponse,
    UserInfoRequest,
    UserInfoResponse,
)
from coreason_authlete.exceptions import AuthleteApiError, OversizedResponseError
from coreason_authlete.utils.logger import logger

MAX_RESPONSE_SIZE = 1_000_000

R = TypeVar("R", bound=ApiResponse)


class AuthleteApiAsync:
    """
    Async client for the Authlete API.

    Every call POSTs the JSON form of a request DTO and returns the reply parsed
    into the matching response DTO. Protocol-level outcomes are reported through
    the ``action`` of the response; only transport failures and non-2xx replies
    raise ``AuthleteApiError``.

    Example:
        async with AuthleteApiAsync(AuthleteConfig()) as api:
            response = await api.authorization(AuthorizationRequest(parameters=query))
    """

    def __init__(self, config: AuthleteConfig, client: httpx.AsyncClient | None = None) -> None:
        """
        Initialize the client.

        Args:
            config: The connection settings.
            client: External async client (optional). If not provided, one is created
                and closed together with this object.
        """
        self.config = config
        self._internal_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.config.http_timeout)

        # Instrument the client for distributed tracing
        HTTPXClientInstrumentor().instrument_client(self._client)

    async def __aenter__(self) -> "AuthleteApiAsync":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._internal_client:
            await self._client.aclose()

    def _url(self, path: str) -> str:
        if self.config.api_version is ApiVersion.V3:
            return f"{self.config.base_url}/api/{self.config.api_key}{path}"
        return f"{self.config.base_url}/api{path}"

    def _auth_headers(self) -> dict[str, str]:
        if self.config.api_version is ApiVersion.V3 and self.config.access_token is not None:
            return {"Authorization": f"Bearer {self.config.access_token.get_secret_value()}"}
        return {}

    def _basic_auth(self) -> httpx.BasicAuth | None:
        if self.config.api_version is ApiVersion.V2 and self.config.api_secret is not None:
            return httpx.BasicAuth(self.config.api_key or "", self.config.api_secret.get_secret_value())
        return None

    async def call(
        self,
        path: str,
        request: AuthleteModel | None,
        response_type: type[R],
        method: str = "POST",
        params: dict[str, Any] | None = None,
    ) -> R:
        """
        Calls one Authlete API.

        Args:
            path: The API path without the ``/api`` (and service ID) prefix, e.g. ``/auth/token``.
            request: The request DTO sent as the JSON body, or None for calls without a body.
            response_type: The response DTO class.
            method: The HTTP method.
            params: Query parameters.

        Returns:
            The parsed response.

        Raises:
            AuthleteApiError: If the call fails, the reply is not 2xx or cannot be parsed.
            OversizedResponseError: If the reply exceeds ``MAX_RESPONSE_SIZE`` bytes.
        """
        url = self._url(path)
        headers = {"Accept": "application/json", **self._auth_headers()}
        content: str | None = None
        if request is not None:
            content = request.to_json()
            headers["Content-Type"] = "application/json"

        logger.debug(f"Calling Authlete API: {method} {path}")

        try:
            async with self._client.stream(
                method,
                url,
                content=content,
                headers=headers,
                params=params,
                auth=self._basic_auth() or httpx.USE_CLIENT_DEFAULT,
            ) as response:
                body = await _read_limited(response)
        except httpx.HTTPError as e:
            logger.error(f"Authlete API call to {path} failed: {e}")
            raise AuthleteApiError(f"Failed to call {path}: {e}") from e

        text = body.decode("utf-8", errors="replace")

        if not response.is_success:
            logger.error(f"Authlete API {path} replied with status {response.status_code}")
            raise AuthleteApiError(
                f"Authlete API {path} replied with status {response.status_code}",
                status_code=response.status_code,
                status_message=response.reason_phrase,
                response_body=text,
            )

        try:
            result = response_type.from_json(body)
        except ValidationError as e:
            logger.error(f"Invalid response from Authlete API {path}: {e}")
            raise AuthleteApiError(
                f"Invalid response from {path}: {e}",
                status_code=response.status_code,
                status_message=response.reason_phrase,
                response_body=text,
            ) from e

        logger.debug(f"Authlete API {path} replied: {result.result_code} {result.result_message}")
        return result

    # Authorization endpoint

    async def authorization(self, request: AuthorizationRequest) -> AuthorizationResponse:
        return await self.call("/auth/authorization", request, AuthorizationResponse)

    async def authorization_issue(self, request: AuthorizationIssueRequest) -> AuthorizationIssueResponse:
        return await self.call("/auth/authorization/issue", request, AuthorizationIssueResponse)

    async def authorization_fail(self, request: AuthorizationFailRequest) -> AuthorizationFailResponse:
        return await self.call("/auth/authorization/fail", request, AuthorizationFailResponse)

    async def pushed_authorization_request(self, request: PushedAuthReqRequest) -> PushedAuthReqResponse:
        return await self.call("/pushed_auth_req", request, PushedAuthReqResponse)

    # Token endpoint

    async def token(self, request: TokenRequest) -> TokenResponse:
        return await self.call("/auth/token", request, TokenResponse)

    async def token_issue(self, request: TokenIssueRequest) -> TokenIssueResponse:
        return await self.call("/auth/token/issue", request, TokenIssueResponse)

    async def token_fail(self, request: TokenFailRequest) -> TokenFailResponse:
        return await self.call("/auth/token/fail", request, TokenFailResponse)

    # Token management

    async def token_create(self, request: TokenCreateRequest) -> TokenCreateResponse:
        return await self.call("/auth/token/create", request, TokenCreateResponse)

    async def token_update(self, request: TokenUpdateRequest) -> TokenUpdateResponse:
        return await self.call("/auth/token/update", request, TokenUpdateResponse)

    async def token_revoke(self, request: TokenRevokeRequest) -> TokenRevokeResponse:
        return await self.call("/auth/token/revoke", request, TokenRevokeResponse)

    async def get_token_list(
        self,
        client_identifier: str | None = None,
        subject: str | None = None,
        start: int | None = None,
        end: int | None = None,
    ) -> TokenListResponse:
        """Lists access tokens, optionally filtered by client and subject. ``start`` and ``end`` page the result."""
        params = {
            key: value
            for key, value in (
                ("clientIdentifier", client_identifier),
                ("subject", subject),
                ("start", start),
                ("end", end),
            )
            if value is not None
        }
        return await self.call("/auth/token/get/list", None, TokenListResponse, method="GET", params=params)

    # Revocation, introspection and UserInfo endpoints

    async def revocation(self, request: RevocationRequest) -> RevocationResponse:
        return await self.call("/auth/revocation", request, RevocationResponse)

    async def introspection(self, request: IntrospectionRequest) -> IntrospectionResponse:
        return await self.call("/auth/introspection", request, IntrospectionResponse)

    async def standard_introspection(self, request: StandardIntrospectionRequest) -> StandardIntrospectionResponse:
        return await self.call("/auth/introspection/standard", request, StandardIntrospectionResponse)

    async def userinfo(self, request: UserInfoRequest) -> UserInfoResponse:
        return await self.call("/auth/userinfo", request, UserInfoResponse)

    async def userinfo_issue(self, request: UserInfoIssueRequest) -> UserInfoIssueResponse:
        return await self.call("/auth/userinfo/issue", request, UserInfoIssueResponse)

    # CIBA

    async def backchannel_authentication(
        self, request: BackchannelAuthenticationRequest
    ) -> BackchannelAuthenticationResponse:
        return await self.call("/backchannel/authentication", request, BackchannelAuthenticationResponse)

    async def backchannel_authentication_issue(
        self, request: BackchannelAuthenticationIssueRequest
    ) -> BackchannelAuthenticationIssueResponse:
        return await self.call("/backchannel/authentication/issue", request, BackchannelAuthenticationIssueResponse)

    async def backchannel_authentication_fail(
        self, request: BackchannelAuthenticationFailRequest
    ) -> BackchannelAuthenticationFailResponse:
        return await self.call("/backchannel/authentication/fail", request, BackchannelAuthenticationFailResponse)

    async def backchannel_authentication_complete(
        self, request: BackchannelAuthenticationCompleteRequest
    ) -> BackchannelAuthenticationCompleteResponse:
        return await self.call(
            "/backchannel/authentication/complete", request, BackchannelAuthenticationCompleteResponse
        )

    # Device flow

    async def device_authorization(self, request: DeviceAuthorizationRequest) -> DeviceAuthorizationResponse:
        return await self.call("/device/authorization", request, DeviceAuthorizationResponse)

    async def device_verification(self, request: DeviceVerificationRequest) -> DeviceVerificationResponse:
        return await self.call("/device/verification", request, DeviceVerificationResponse)

    async def device_complete(self, request: DeviceCompleteRequest) -> DeviceCompleteResponse:
        return await self.call("/device/complete", request, DeviceCompleteResponse)

    # Verifiable credentials

    async def credential_issuer_metadata(
        self, request: CredentialIssuerMetadataRequest
    ) -> CredentialIssuerMetadataResponse:
        return await self.call("/vci/metadata", request, CredentialIssuerMetadataResponse)

    async def credential_jwt_issuer_metadata(
        self, request: CredentialJwtIssuerMetadataRequest
    ) -> CredentialJwtIssuerMetadataResponse:
        return await self.call("/vci/jwtissuer", request, CredentialJwtIssuerMetadataResponse)

    async def credential_issuer_jwks(self, request: CredentialIssuerJwksRequest) -> CredentialIssuerJwksResponse:
        return await self.call("/vci/jwks", request, CredentialIssuerJwksResponse)

    async def credential_nonce(self, request: CredentialNonceRequest) -> CredentialNonceResponse:
        return await self.call("/vci/nonce", request, CredentialNonceResponse)

    async def credential_offer_create(self, request: CredentialOfferCreateRequest) -> CredentialOfferCreateResponse:
        return await self.call("/vci/offer/create", request, CredentialOfferCreateResponse)

    async def credential_offer_info(self, request: CredentialOfferInfoRequest) -> CredentialOfferInfoResponse:
        return await self.call("/vci/offer/info", request, CredentialOfferInfoResponse)

    async def credential_single_parse(self, request: CredentialSingleParseRequest) -> CredentialSingleParseResponse:
        return await self.call("/vci/single/parse", request, CredentialSingleParseResponse)

    async def credential_single_issue(self, request: CredentialSingleIssueRequest) -> CredentialSingleIssueResponse:
        return await self.call("/vci/single/issue", request, CredentialSingleIssueResponse)

    async def credential_batch_parse(self, request: CredentialBatchParseRequest) -> CredentialBatchParseResponse:
        return await self.call("/vci/batch/parse", request, CredentialBatchParseResponse)

    async def credential_batch_issue(self, request: CredentialBatchIssueRequest) -> CredentialBatchIssueResponse:
        return await self.call("/vci/batch/issue", request, CredentialBatchIssueResponse)

    async def credential_deferred_parse(
        self, request: CredentialDeferredParseRequest
    ) -> CredentialDeferredParseResponse:
        return await self.call("/vci/deferred/parse", request, CredentialDeferredParseResponse)

    async def credential_deferred_issue(
        self, request: CredentialDeferredIssueRequest
    ) -> CredentialDeferredIssueResponse:
        return await self.call("/vci/deferred/issue", request, CredentialDeferredIssueResponse)


async def _read_limited(response: httpx.Response) -> bytes:
    """Reads the body of a streamed response, refusing bodies over ``MAX_RESPONSE_SIZE`` bytes."""
    content_length = response.headers.get("Content-Length")
    if content_length and content_length.isdigit() and int(content_length) > MAX_RESPONSE_SIZE:
        raise OversizedResponseError("Response too large", status_code=response.status_code)

    content = bytearray()
    async for chunk in response.aiter_bytes():
        content.extend(chunk)
        if len(content) > MAX_RESPONSE_SIZE:
            raise OversizedResponseError("Response too large", status_code=response.status_code)
    return bytes(content)


T = TypeVar("T")


class AuthleteApi(AbstractContextManager["AuthleteApi"]):
    """
    Synchronous facade over ``AuthleteApiAsync``.

    The async client runs on an event loop in a background thread (an anyio
    blocking portal) that lives until ``close()`` is called or the ``with``
    block exits. Calls may be made from several threads at once.

    Example:
        with AuthleteApi(AuthleteConfig()) as api:
            response = api.token(TokenRequest(parameters=body))
    """

    def __init__(self, config: AuthleteConfig, client: httpx.AsyncClient | None = None) -> None:
        self._async = AuthleteApiAsync(config, client)
        self._portal_cm: AbstractContextManager[BlockingPortal] | None = None
        self._portal: BlockingPortal | None = None
        self._lock = threading.Lock()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Closes the async client and stops the background event loop."""
        if self._portal is None or self._portal_cm is None:
            return
        try:
            self._portal.call(self._async.aclose)
        finally:
            portal_cm = self._portal_cm
            self._portal = None
            self._portal_cm = None
            portal_cm.__exit__(None, None, None)

    def _run(self, func: Callable[..., Awaitable[T]], *args: Any) -> T:
        with self._lock:
            if self._portal is None:
                self._portal_cm = start_blocking_portal()
                self._portal = self._portal_cm.__enter__()
            portal = self._portal
        return portal.call(func, *args)

    def authorization(self, request: AuthorizationRequest) -> AuthorizationResponse:
        return self._run(self._async.authorization, request)

    def authorization_issue(self, request: AuthorizationIssueRequest) -> AuthorizationIssueResponse:
        return self._run(self._async.authorization_issue, request)

    def authorization_fail(self, request: AuthorizationFailRequest) -> AuthorizationFailResponse:
        return self._run(self._async.authorization_fail, request)

    def pushed_authorization_request(self, request: PushedAuthReqRequest) -> PushedAuthReqResponse:
        return self._run(self._async.pushed_authorization_request, request)

    def token(self, request: TokenRequest) -> TokenResponse:
        return self._run(self._async.token, request)

    def token_issue(self, request: TokenIssueRequest) -> TokenIssueResponse:
        return self._run(self._async.token_issue, request)

    def token_fail(self, request: TokenFailRequest) -> TokenFailResponse:
        return self._run(self._async.token_fail, request)

    def token_create(self, request: TokenCreateRequest) -> TokenCreateResponse:
        return self._run(self._async.token_create, request)

    def token_update(self, request: TokenUpdateRequest) -> TokenUpdateResponse:
        return self._run(self._async.token_update, request)

    def token_revoke(self, request: TokenRevokeRequest) -> TokenRevokeResponse:
        return self._run(self._async.token_revoke, request)

    def get_token_list(
        self,
        client_identifier: str | None = None,
        subject: str | None = None,
        start: int | None = None,
        end: int | None = None,
    ) -> TokenListResponse:
        return self._run(self._async.get_token_list, client_identifier, subject, start, end)

    def revocation(self, request: RevocationRequest) -> RevocationResponse:
        return self._run(self._async.revocation, request)

    def introspection(self, request: IntrospectionRequest) -> IntrospectionResponse:
        return self._run(self._async.introspection, request)

    def standard_introspection(self, request: StandardIntrospectionRequest) -> StandardIntrospectionResponse:
        return self._run(self._async.standard_introspection, request)

    def userinfo(self, request: UserInfoRequest) -> UserInfoResponse:
        return self._run(self._async.userinfo, request)

    def userinfo_issue(self, request: UserInfoIssueRequest) -> UserInfoIssueResponse:
        return self._run(self._async.userinfo_issue, request)

    def backchannel_authentication(
        self, request: BackchannelAuthenticationRequest
    ) -> BackchannelAuthenticationResponse:
        return self._run(self._async.backchannel_authentication, request)

    def backchannel_authentication_issue(
        self, request: BackchannelAuthenticationIssueRequest
    ) -> BackchannelAuthenticationIssueResponse:
        return self._run(self._async.backchannel_authentication_issue, request)

    def backchannel_authentication_fail(
        self, request: BackchannelAuthenticationFailRequest
    ) -> BackchannelAuthenticationFailResponse:
        return self._run(self._async.backchannel_authentication_fail, request)

    def backchannel_authentication_complete(
        self, request: BackchannelAuthenticationCompleteRequest
    ) -> BackchannelAuthenticationCompleteResponse:
        return self._run(self._async.backchannel_authentication_complete, request)

    def device_authorization(self, request: DeviceAuthorizationRequest) -> DeviceAuthorizationResponse:
        return self._run(self._async.device_authorization, request)

    def device_verification(self, request: DeviceVerificationRequest) -> DeviceVerificationResponse:
        return self._run(self._async.device_verification, request)

    def device_complete(self, request: DeviceCompleteRequest) -> DeviceCompleteResponse:
        return self._run(self._async.device_complete, request)

    def credential_issuer_metadata(self, request: CredentialIssuerMetadataRequest) -> CredentialIssuerMetadataResponse:
        return self._run(self._async.credential_issuer_metadata, request)

    def credential_jwt_issuer_metadata(
        self, request: CredentialJwtIssuerMetadataRequest
    ) -> CredentialJwtIssuerMetadataResponse:
        return self._run(self._async.credential_jwt_issuer_metadata, request)

    def credential_issuer_jwks(self, request: CredentialIssuerJwksRequest) -> CredentialIssuerJwksResponse:
        return self._run(self._async.credential_issuer_jwks, request)

    def credential_nonce(self, request: CredentialNonceRequest) -> CredentialNonceResponse:
        return self._run(self._async.credential_nonce, request)

    def credential_offer_create(self, request: CredentialOfferCreateRequest) -> CredentialOfferCreateResponse:
        return self._run(self._async.credential_offer_create, request)

    def credential_offer_info(self, request: CredentialOfferInfoRequest) -> CredentialOfferInfoResponse:
        return self._run(self._async.credential_offer_info, request)

    def credential_single_parse(self, request: CredentialSingleParseRequest) -> CredentialSingleParseResponse:
        return self._run(self._async.credential_single_parse, request)

    def credential_single_issue(self, request: CredentialSingleIssueRequest) -> CredentialSingleIssueResponse:
        return self._run(self._async.credential_single_issue, request)

    def credential_batch_parse(self, request: CredentialBatchParseRequest) -> CredentialBatchParseResponse:
        return self._run(self._async.credential_batch_parse, request)

    def credential_batch_issue(self, request: CredentialBatchIssueRequest) -> CredentialBatchIssueResponse:
        return self._run(self._async.credential_batch_issue, request)

    def credential_deferred_parse(self, request: CredentialDeferredParseRequest) -> CredentialDeferredParseResponse:
        return self._run(self._async.credential_deferred_parse, request)

    def credential_deferred_issue(self, request: CredentialDeferredIssueRequest) -> CredentialDeferredIssueResponse:
        return self._run(self._async.credential_deferred_issue, request)
