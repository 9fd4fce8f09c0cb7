# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authlete

import base64
import json
from collections.abc import AsyncIterator, Callable

import httpx
import pytest

from coreason_authlete.api import MAX_RESPONSE_SIZE, AuthleteApiAsync
from coreason_authlete.config import AuthleteConfig
from coreason_authlete.dto.authorization import AuthorizationRequest, AuthorizationResponse
from coreason_authlete.dto.backchannel import BackchannelAuthenticationCompleteRequest
from coreason_authlete.dto.credential import CredentialIssuerMetadataRequest, CredentialSingleIssueRequest
from coreason_authlete.dto.token import TokenCreateRequest, TokenCreateResponse
from coreason_authlete.exceptions import AuthleteApiError, OversizedResponseError
from coreason_authlete.types import GrantType

MockFactory = Callable[..., tuple[httpx.AsyncClient, list[httpx.Request]]]


@pytest.mark.asyncio
async def test_v3_call(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    """V3 puts the service ID in the path and authenticates with the service access token."""
    client, sent = mock_authlete(json={"resultCode": "A004001", "action": "INTERACTION", "ticket": "t-1"})

    async with AuthleteApiAsync(config, client=client) as api:
        response = await api.authorization(AuthorizationRequest(parameters="response_type=code"))

    assert isinstance(response, AuthorizationResponse)
    assert response.action is AuthorizationResponse.Action.INTERACTION
    assert response.ticket == "t-1"

    request = sent[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.authlete.test/api/715948317/auth/authorization"
    assert request.headers["Authorization"] == "Bearer service-access-token"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"parameters": "response_type=code"}


@pytest.mark.asyncio
async def test_v2_call(mock_authlete: MockFactory) -> None:
    """V2 uses Basic authentication with the API key and secret."""
    config = AuthleteConfig(base_url="https://api.authlete.test", api_key="key", api_secret="secret", api_version="V2")
    client, sent = mock_authlete(json={"action": "OK", "accessToken": "at"})

    async with AuthleteApiAsync(config, client=client) as api:
        response = await api.token_create(
            TokenCreateRequest().set(grant_type=GrantType.CLIENT_CREDENTIALS, client_id=12345)
        )

    assert response.action is TokenCreateResponse.Action.OK
    request = sent[0]
    assert str(request.url) == "https://api.authlete.test/api/auth/token/create"
    expected = base64.b64encode(b"key:secret").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.content == b'{"grantType":"client_credentials","clientId":12345}'


@pytest.mark.asyncio
async def test_endpoint_paths(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    client, sent = mock_authlete(json={"resultCode": "A000000"})

    async with AuthleteApiAsync(config, client=client) as api:
        metadata = await api.credential_issuer_metadata(CredentialIssuerMetadataRequest(pretty=True))
        issued = await api.credential_single_issue(CredentialSingleIssueRequest(access_token="at"))
        completed = await api.backchannel_authentication_complete(BackchannelAuthenticationCompleteRequest(ticket="t"))

    assert metadata.result_code == issued.result_code == completed.result_code == "A000000"

    assert [request.url.path for request in sent] == [
        "/api/715948317/vci/metadata",
        "/api/715948317/vci/single/issue",
        "/api/715948317/backchannel/authentication/complete",
    ]
    assert json.loads(sent[0].content) == {"pretty": True}


@pytest.mark.asyncio
async def test_get_token_list(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    client, sent = mock_authlete(json={"totalCount": 0, "start": 0, "end": 10, "accessTokens": []})

    async with AuthleteApiAsync(config, client=client) as api:
        response = await api.get_token_list(subject="alice", start=0, end=10)

    assert response.total_count == 0
    assert response.access_tokens == []
    request = sent[0]
    assert request.method == "GET"
    assert request.url.path == "/api/715948317/auth/token/get/list"
    assert dict(request.url.params) == {"subject": "alice", "start": "0", "end": "10"}
    assert request.content == b""


@pytest.mark.asyncio
async def test_error_status(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    """A non-2xx reply raises with the status and the raw body."""
    client, _ = mock_authlete(json={"resultCode": "A001202", "resultMessage": "Authorization failed"}, status_code=401)

    async with AuthleteApiAsync(config, client=client) as api:
        with pytest.raises(AuthleteApiError) as exc:
            await api.authorization(AuthorizationRequest(parameters="x"))

    assert exc.value.status_code == 401
    assert exc.value.status_message == "Unauthorized"
    assert exc.value.response_body is not None
    assert "A001202" in exc.value.response_body


@pytest.mark.asyncio
async def test_network_error(config: AuthleteConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    async with AuthleteApiAsync(config, client=client) as api:
        with pytest.raises(AuthleteApiError) as exc:
            await api.authorization(AuthorizationRequest(parameters="x"))

    assert exc.value.status_code == 0
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_invalid_response_body(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    client, _ = mock_authlete(content=b"<html>gateway error</html>")

    async with AuthleteApiAsync(config, client=client) as api:
        with pytest.raises(AuthleteApiError) as exc:
            await api.authorization(AuthorizationRequest(parameters="x"))

    assert exc.value.status_code == 200
    assert exc.value.response_body == "<html>gateway error</html>"


@pytest.mark.asyncio
async def test_unknown_action_does_not_fail_the_call(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    client, _ = mock_authlete(json={"action": "ISSUE_LATER", "resultCode": "A000000", "ticket": "t"})

    async with AuthleteApiAsync(config, client=client) as api:
        response = await api.authorization(AuthorizationRequest(parameters="x"))

    assert response.action is None
    assert response.result_code == "A000000"
    assert response.ticket == "t"


@pytest.mark.asyncio
async def test_oversized_response_content_length(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    client, _ = mock_authlete(content=b"x" * (MAX_RESPONSE_SIZE + 1))

    async with AuthleteApiAsync(config, client=client) as api:
        with pytest.raises(OversizedResponseError):
            await api.authorization(AuthorizationRequest(parameters="x"))


@pytest.mark.asyncio
async def test_oversized_response_streamed(config: AuthleteConfig) -> None:
    """Bodies without Content-Length are cut off while being read."""

    async def chunks() -> AsyncIterator[bytes]:
        for _ in range(3):
            yield b"x" * (MAX_RESPONSE_SIZE // 2)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=chunks())

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    async with AuthleteApiAsync(config, client=client) as api:
        with pytest.raises(OversizedResponseError):
            await api.authorization(AuthorizationRequest(parameters="x"))


@pytest.mark.asyncio
async def test_external_client_is_not_closed(config: AuthleteConfig, mock_authlete: MockFactory) -> None:
    client, _ = mock_authlete(json={})

    async with AuthleteApiAsync(config, client=client):
        pass

    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_internal_client_is_closed(config: AuthleteConfig) -> None:
    api = AuthleteApiAsync(config)
    async with api:
        assert not api._client.is_closed

    assert api._client.is_closed
    assert api._client.timeout.read == config.http_timeout
