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

from coreason_authlete.dto.client import Client
from coreason_authlete.dto.common import (
    AuthzDetails,
    AuthzDetailsElement,
    DynamicScope,
    Grant,
    Property,
    Scope,
    stringify_properties,
    stringify_scope_names,
)
from coreason_authlete.types import ClientType

PAYMENT_DETAILS = (
    '[{"type":"payment_initiation","actions":["initiate","status"],'
    '"locations":["https://bank.example/payments"],'
    '"instructedAmount":{"currency":"EUR","amount":"123.50"},"creditorName":"Merchant A"}]'
)


def test_property_str() -> None:
    assert str(Property(key="k", value="v")) == "k=v"
    assert str(Property(key="k", value="v", hidden=True)) == "k=v (hidden)"


def test_stringify_properties() -> None:
    properties = [Property(key="a", value="1"), Property(key="b", value="2", hidden=True)]
    assert stringify_properties(properties) == "[a=1,b=2]"
    assert stringify_properties([]) == "[]"
    assert stringify_properties(None) is None


def test_stringify_scope_names() -> None:
    assert stringify_scope_names([Scope(name="openid"), Scope(name="email")]) == "openid email"
    assert stringify_scope_names(None) is None


def test_dynamic_scope_str() -> None:
    assert str(DynamicScope(name="transaction", value="123")) == "transaction:123"


def test_authz_details_wire_form_is_an_array() -> None:
    details = AuthzDetails.from_json(PAYMENT_DETAILS)

    assert details.elements is not None
    assert len(details.elements) == 1
    element = details.elements[0]
    assert element.type == "payment_initiation"
    assert element.actions == ["initiate", "status"]
    assert element.locations == ["https://bank.example/payments"]

    wire = json.loads(details.to_json())
    assert isinstance(wire, list)
    assert wire[0]["type"] == "payment_initiation"
    assert wire[0]["creditorName"] == "Merchant A"
    assert "otherFields" not in wire[0]


def test_authz_details_without_elements() -> None:
    """An instance without elements is written as null and read back."""
    details = AuthzDetails()
    assert details.to_json() == "null"
    assert AuthzDetails.from_json(details.to_json()) == details
    assert AuthzDetails.from_json("null").elements is None
    assert AuthzDetails.from_json("[]").elements == []


def test_authz_details_other_fields() -> None:
    """Members not defined by RFC 9396 are kept together as a JSON object."""
    element = AuthzDetails.from_json(PAYMENT_DETAILS).elements[0]  # type: ignore[index]

    assert element.get_other_fields_as_dict() == {
        "instructedAmount": {"currency": "EUR", "amount": "123.50"},
        "creditorName": "Merchant A",
    }
    assert json.loads(element.other_fields or "") == element.get_other_fields_as_dict()


def test_authz_details_element_without_other_fields() -> None:
    element = AuthzDetailsElement.from_dict({"type": "account_information", "datatypes": ["balances"]})

    assert element.data_types == ["balances"]
    assert element.other_fields is None
    assert element.get_other_fields_as_dict() is None
    assert element.to_dict() == {"type": "account_information", "datatypes": ["balances"]}


def test_authz_details_element_other_fields_set_directly() -> None:
    element = AuthzDetailsElement(type="t", other_fields={"limit": 10})
    assert element.other_fields == '{"limit":10}'
    assert element.to_dict() == {"type": "t", "limit": 10}


def test_authz_details_element_rejects_malformed_other_fields() -> None:
    with pytest.raises(ValidationError):
        AuthzDetailsElement(other_fields="not json")
    with pytest.raises(ValidationError):
        AuthzDetailsElement(other_fields="[1, 2]")


def test_grant_uses_snake_case_authorization_details() -> None:
    """The grant object spells authorization_details in snake_case, as FAPI Grant Management does."""
    grant = Grant.from_dict(
        {
            "scopes": [{"scope": "read", "resource": ["https://rs.example"]}],
            "claims": ["email"],
            "authorization_details": [{"type": "payment_initiation"}],
        }
    )

    assert grant.scopes is not None
    assert grant.scopes[0].resource == ["https://rs.example"]
    assert grant.authorization_details is not None
    assert grant.authorization_details.elements[0].type == "payment_initiation"  # type: ignore[index]
    assert grant.to_dict()["authorization_details"] == [{"type": "payment_initiation"}]


def test_client_keeps_unknown_members() -> None:
    """Client metadata unknown to this version survives a parse/serialize cycle."""
    client = Client.from_dict(
        {"clientId": 57297408867, "clientName": "My App", "clientType": "CONFIDENTIAL", "brandNewSetting": True}
    )

    assert client.client_id == 57297408867
    assert client.client_type is ClientType.CONFIDENTIAL
    assert client.model_extra == {"brandNewSetting": True}
    assert client.to_dict()["brandNewSetting"] is True
