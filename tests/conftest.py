# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authlete

import os
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from coreason_authlete.config import AuthleteConfig

BASE_URL = "https://api.authlete.test"
SERVICE_ID = "715948317"
ACCESS_TOKEN = "service-access-token"


@pytest.fixture(autouse=True)
def clean_authlete_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Removes AUTHLETE_* variables of the developer's shell so that every test
    builds its configuration from scratch.
    """
    for key in list(os.environ):
        if key.upper().startswith("AUTHLETE_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def config() -> AuthleteConfig:
    return AuthleteConfig(base_url=BASE_URL, api_key=SERVICE_ID, access_token=ACCESS_TOKEN)


@pytest.fixture
def mock_authlete() -> Callable[..., tuple[httpx.AsyncClient, list[httpx.Request]]]:
    """
    Factory for an httpx client answering every request with a fixed reply.

    Returns the client and the list the sent requests are recorded in.
    """

    def factory(
        json: Any = None, status_code: int = 200, content: bytes | None = None
    ) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
        sent: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json if json is not None else {})

        return httpx.AsyncClient(transport=httpx.MockTransport(handler)), sent

    return factory
