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
Small value objects embedded in requests and responses.
"""

import json
from typing import Any

from pydantic import Field, SerializerFunctionWrapHandler, field_validator, model_serializer, model_validator

from coreason_authlete.dto.base import AuthleteModel, JsonText, parse_json_text
from coreason_authlete.types import ClaimMatchOperation, ClaimRuleOperation, GrantType, Sns


class Property(AuthleteModel):
    """
    An arbitrary key-value pair attached to an access token or an authorization code.

    Hidden properties are not included in responses sent to client applications,
    such as the token endpoint response.

    Attributes:
        key (str | None): The property name.
        value (str | None): The property value.
        hidden (bool): Whether the property is hidden from client applications.
    """

    key: str | None = None
    value: str | None = None
    hidden: bool = False

    def __str__(self) -> str:
        return f"{self.key}={self.value}{' (hidden)' if self.hidden else ''}"


def stringify_properties(properties: list[Property] | None) -> str | None:
    """Formats properties as ``[k1=v1,k2=v2]`` for summaries."""
    if properties is None:
        return None
    return "[" + ",".join(f"{p.key}={p.value}" for p in properties if p is not None) + "]"


class Pair(AuthleteModel):
    key: str | None = None
    value: str | None = None


class TaggedValue(AuthleteModel):
    """A value with a language tag, e.g. ``("ja", "...")`` for a localized description."""

    tag: str | None = None
    value: str | None = None


class StringArray(AuthleteModel):
    array: list[str] | None = None


class Scope(AuthleteModel):
    """
    A scope registered in an Authlete service.

    Attributes:
        name (str | None): The scope name.
        default_entry (bool): Whether the scope is applied when a request has no scope.
        description (str | None): Description of the scope.
        descriptions (list[TaggedValue] | None): Localized descriptions.
        attributes (list[Pair] | None): Arbitrary attributes of the scope.
    """

    name: str | None = None
    default_entry: bool = False
    description: str | None = None
    descriptions: list[TaggedValue] | None = None
    attributes: list[Pair] | None = None


def stringify_scope_names(scopes: list[Scope] | None) -> str | None:
    if scopes is None:
        return None
    return " ".join(scope.name or "" for scope in scopes if scope is not None)


class DynamicScope(AuthleteModel):
    """A scope of the form ``name:value`` (e.g. ``transaction:123``)."""

    name: str | None = None
    value: str | None = None

    def __str__(self) -> str:
        return f"{self.name}:{self.value}"


_ELEMENT_FIELDS = {
    "type",
    "locations",
    "actions",
    "datatypes",
    "data_types",
    "identifier",
    "privileges",
    "other_fields",
    "otherFields",
}


class AuthzDetailsElement(AuthleteModel):
    """
    One element of the ``authorization_details`` request parameter (RFC 9396).

    On the wire the element is a single JSON object. Members other than the ones
    defined by RFC 9396 are kept in ``other_fields`` as a JSON object and merged
    back when the element is serialized.
    """

    type: str | None = None
    locations: list[str] | None = None
    actions: list[str] | None = None
    data_types: list[str] | None = Field(default=None, alias="datatypes")
    identifier: str | None = None
    privileges: list[str] | None = None
    other_fields: JsonText = None

    @model_validator(mode="before")
    @classmethod
    def collect_other_fields(cls, data: Any) -> Any:
        """Moves members that are not standard element fields into ``other_fields``."""
        if not isinstance(data, dict):
            return data

        extra = {k: v for k, v in data.items() if k not in _ELEMENT_FIELDS}
        if not extra:
            return data

        known = {k: v for k, v in data.items() if k in _ELEMENT_FIELDS}
        given = known.pop("other_fields", None)
        camel = known.pop("otherFields", None)
        if given is None:
            given = camel
        merged: dict[str, Any] = {}
        if isinstance(given, str):
            merged.update(parse_json_text(given, "otherFields", dict))
        elif isinstance(given, dict):
            merged.update(given)
        merged.update(extra)
        known["other_fields"] = merged
        return known

    @field_validator("other_fields")
    @classmethod
    def check_other_fields(cls, v: str | None) -> str | None:
        if v is not None:
            parse_json_text(v, "otherFields", dict)
        return v

    @model_serializer(mode="wrap")
    def merge_other_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        data.pop("otherFields", None)
        data.pop("other_fields", None)
        if self.other_fields is None:
            return data
        merged: dict[str, Any] = json.loads(self.other_fields)
        merged.update(data)
        return merged

    def get_other_fields_as_dict(self) -> dict[str, Any] | None:
        if self.other_fields is None:
            return None
        result: dict[str, Any] = parse_json_text(self.other_fields, "otherFields", dict)
        return result


class AuthzDetails(AuthleteModel):
    """
    The ``authorization_details`` request parameter.

    The wire form is the bare JSON array of elements.
    """

    elements: list[AuthzDetailsElement] | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_array(cls, data: Any) -> Any:
        if data is None:
            return {"elements": None}
        if isinstance(data, list):
            return {"elements": data}
        return data

    @model_serializer(mode="wrap")
    def unwrap_array(self, handler: SerializerFunctionWrapHandler) -> list[Any] | None:
        data = handler(self)
        elements: list[Any] | None = data.get("elements")
        return elements


class GrantScope(AuthleteModel):
    """A scope together with the resources (RFC 8707) it was granted for."""

    scope: str | None = None
    resource: list[str] | None = None


class Grant(AuthleteModel):
    """
    Privileges held by a grant (FAPI Grant Management).
    """

    scopes: list[GrantScope] | None = None
    claims: list[str] | None = None
    authorization_details: AuthzDetails | None = Field(default=None, alias="authorization_details")


class ClaimMatcher(AuthleteModel):
    operation: ClaimMatchOperation | None = None
    claim_name: str | None = None
    comparison_value: str | None = None


class ClaimRule(AuthleteModel):
    operation: ClaimRuleOperation | None = None
    claim_name: str | None = None
    comparison_value: str | None = None


class SnsCredentials(AuthleteModel):
    """API credentials of an SNS used for authentication."""

    sns: Sns | None = None
    api_key: str | None = None
    api_secret: str | None = None


class Address(AuthleteModel):
    """The ``address`` claim (OpenID Connect Core, 5.1.1)."""

    formatted: str | None = None
    street_address: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


class TokenInfo(AuthleteModel):
    """Details of a token taking part in a token exchange (RFC 8693)."""

    client_id: int = 0
    subject: str | None = None
    scopes: list[Scope] | None = None
    expires_at: int = 0
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_entity_id: str | None = None
    client_entity_id_used: bool = False
    resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None


class AccessToken(AuthleteModel):
    """An access token entry as returned by the token list API."""

    access_token_hash: str | None = None
    refresh_token_hash: str | None = None
    client_id: int = 0
    subject: str | None = None
    grant_type: GrantType | None = None
    scopes: list[str] | None = None
    access_token_expires_at: int = 0
    refresh_token_expires_at: int = 0
    created_at: int = 0
    last_refreshed_at: int = 0
    properties: list[Property] | None = None
    refresh_token_scopes: list[str] | None = None
