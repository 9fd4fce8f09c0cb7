# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authlete

import json

import pytest
from pydantic import ValidationError

from coreason_authlete.dto.authorization import AuthorizationFailResponse, AuthorizationIssueRequest
from coreason_authlete.dto.base import format_summary, parse_json_text, stringify
from coreason_authlete.dto.token import TokenCreateRequest, TokenResponse
from coreason_authlete.exceptions import JsonFormatError
from coreason_authlete.types import GrantType


def test_set_is_fluent() -> None:
    """set() assigns the fields and returns the same instance."""
    request = TokenCreateRequest()
    returned = request.set(grant_type=GrantType.CLIENT_CREDENTIALS, client_id=12345)

    assert returned is request
    assert request.grant_type is GrantType.CLIENT_CREDENTIALS
    assert request.client_id == 12345


def test_wire_names_are_camel_case() -> None:
    request = TokenCreateRequest().set(grant_type=GrantType.CLIENT_CREDENTIALS, client_id=12345)
    assert request.to_json() == '{"grantType":"client_credentials","clientId":12345}'


def test_unset_fields_are_omitted() -> None:
    """Fields never assigned do not appear, even those with non-null defaults."""
    request = TokenCreateRequest()
    assert request.to_dict() == {}
    assert request.client_id == 0
    assert request.subject is None


def test_absent_null_and_empty_are_distinct() -> None:
    assert "scopes" not in AuthorizationIssueRequest().to_dict()
    assert AuthorizationIssueRequest().set(scopes=None).to_dict() == {"scopes": None}
    assert AuthorizationIssueRequest().set(scopes=[]).to_dict() == {"scopes": []}


def test_to_json_indent() -> None:
    request = AuthorizationIssueRequest().set(ticket="abc", subject="user-1")
    text = request.to_json(indent=2)
    assert "\n" in text
    assert json.loads(text) == {"ticket": "abc", "subject": "user-1"}


def test_assignment_is_validated() -> None:
    request = TokenCreateRequest()
    with pytest.raises(ValidationError):
        request.set(client_id="not-a-number")
    with pytest.raises(ValidationError):
        request.set(grant_type="telepathy")


def test_from_json_ignores_unknown_members() -> None:
    """Newer API versions may add members; they must not break parsing."""
    response = AuthorizationFailResponse.from_json(
        '{"resultCode":"A004201","action":"LOCATION","responseContent":"https://c/cb?error=x","newMember":1}'
    )
    assert response.action is AuthorizationFailResponse.Action.LOCATION
    assert response.result_code == "A004201"
    assert "newMember" not in response.to_dict()


def test_snake_case_input_is_accepted() -> None:
    request = TokenCreateRequest.from_dict({"grant_type": "client_credentials", "clientId": 5})
    assert request.grant_type is GrantType.CLIENT_CREDENTIALS
    assert request.client_id == 5


def test_enum_constant_names_are_accepted_on_input() -> None:
    response = TokenResponse.from_dict({"grantType": "REFRESH_TOKEN", "clientAuthMethod": "CLIENT_SECRET_BASIC"})
    assert response.grant_type is GrantType.REFRESH_TOKEN
    assert response.to_dict()["grantType"] == "refresh_token"
    assert response.to_dict()["clientAuthMethod"] == "client_secret_basic"


def test_unknown_action_is_read_as_null() -> None:
    """An action added by a newer server does not make the response unreadable."""
    response = TokenResponse.from_json('{"action":"DEVICE_BOUND","resultCode":"A000000","subject":"alice"}')
    assert response.action is None
    assert response.subject == "alice"

    assert TokenResponse.from_dict({"action": "OK"}).action is TokenResponse.Action.OK
    assert AuthorizationFailResponse.from_dict({"action": None}).action is None

    with pytest.raises(ValidationError):
        TokenResponse.from_dict({"action": 7})


def test_json_text_fields() -> None:
    """JSON text fields take raw text, or structured values that are serialized compactly."""
    request = AuthorizationIssueRequest()

    request.set(claims='{"name": "Alice"}')
    assert request.claims == '{"name": "Alice"}'

    request.set(claims={"name": "Alice", "age": 30})
    assert request.claims == '{"name":"Alice","age":30}'

    request.set(claims={})
    assert request.claims is None


def test_parse_json_text() -> None:
    assert parse_json_text('{"a":1}', "x") == {"a": 1}
    assert parse_json_text("[1,2]", "x", list) == [1, 2]

    with pytest.raises(JsonFormatError, match="'x'"):
        parse_json_text("{", "x")
    with pytest.raises(JsonFormatError, match="unexpected JSON type"):
        parse_json_text('"text"', "x")
    with pytest.raises(ValueError):
        parse_json_text("[]", "x", dict)


def test_summary_formatting() -> None:
    assert stringify(None) == "null"
    assert stringify(True) == "true"
    assert stringify(GrantType.PASSWORD) == "password"
    assert format_summary(a=1, b=None, c=False) == "a=1, b=null, c=false"
