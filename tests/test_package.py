# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authlete

import pytest

import coreason_authlete
from coreason_authlete import dto
from coreason_authlete.types import GrantType, Prompt


def test_version() -> None:
    assert coreason_authlete.__version__ == "0.1.0"


def test_public_names_are_importable() -> None:
    for name in coreason_authlete.__all__:
        assert hasattr(coreason_authlete, name), name
    for name in dto.__all__:
        assert hasattr(dto, name), name


def test_every_response_has_result_fields() -> None:
    """Every API response exposes resultCode and resultMessage."""
    responses = [getattr(dto, name) for name in dto.__all__ if name.endswith("Response") and name != "ApiResponse"]
    assert responses
    for response_type in responses:
        assert issubclass(response_type, dto.ApiResponse), response_type.__name__
        parsed = response_type.from_dict({"resultCode": "A000000", "resultMessage": "ok"})
        assert parsed.result_code == "A000000"
        assert parsed.to_dict() == {"resultCode": "A000000", "resultMessage": "ok"}


MODEL_TYPES = [
    model_type
    for name in dto.__all__
    if isinstance(model_type := getattr(dto, name), type) and issubclass(model_type, dto.AuthleteModel)
]


def explicit_defaults(model_type: type[dto.AuthleteModel]) -> dto.AuthleteModel:
    """Builds an instance with every field explicitly set to its default (mostly None)."""
    values = {name: info.get_default(call_default_factory=True) for name, info in model_type.model_fields.items()}
    return model_type(**values)


@pytest.mark.parametrize("model_type", MODEL_TYPES, ids=lambda t: t.__name__)
def test_round_trip_of_empty_instance(model_type: type[dto.AuthleteModel]) -> None:
    instance = model_type()
    assert model_type.from_json(instance.to_json()) == instance
    assert model_type.from_dict(instance.to_dict()) == instance


@pytest.mark.parametrize("model_type", MODEL_TYPES, ids=lambda t: t.__name__)
def test_round_trip_with_null_fields(model_type: type[dto.AuthleteModel]) -> None:
    """Fields explicitly set to null survive serialization."""
    instance = explicit_defaults(model_type)
    assert model_type.from_json(instance.to_json()) == instance


def populated_instances() -> list[dto.AuthleteModel]:
    client = dto.Client.from_dict({"clientId": 5, "clientName": "demo", "experimentalFlag": True})
    authz_details = dto.AuthzDetails(
        elements=[
            dto.AuthzDetailsElement(type="payment_initiation", actions=[], other_fields='{"amount":"10.00"}'),
            dto.AuthzDetailsElement(type="account_information", locations=None),
        ]
    )
    grant = dto.Grant(scopes=[dto.GrantScope(scope="accounts", resource=[])], claims=None)
    return [
        dto.AuthorizationResponse(
            action=dto.AuthorizationResponse.Action.INTERACTION,
            client=client,
            prompts=[Prompt.CONSENT],
            scopes=[],
            claims=None,
            authorization_details=authz_details,
            grant=grant,
            ticket="ticket-1",
        ),
        dto.TokenResponse(
            action=dto.TokenResponse.Action.OK,
            grant_type=GrantType.AUTHORIZATION_CODE,
            properties=[dto.Property(key="shop", value="1", hidden=True), dto.Property(key="tier", value=None)],
            scopes=[],
            resources=None,
            authorization_details=authz_details,
        ),
        dto.IntrospectionResponse(
            action=dto.IntrospectionResponse.Action.OK,
            grant=grant,
            properties=[],
        ),
        dto.BackchannelAuthenticationCompleteRequest(
            ticket="ticket-2",
            result=dto.BackchannelAuthenticationCompleteRequest.Result.AUTHORIZED,
            claims={"name": "Alice"},
            properties=[dto.Property(key="k", value="v")],
            scopes=None,
        ),
        dto.CredentialIssuanceOrder(
            request_identifier="req-1",
            credential_payload={"vct": "IdentityCredential", "given_name": "Alice"},
            issuance_deferred=False,
        ),
    ]


@pytest.mark.parametrize("instance", populated_instances(), ids=lambda x: type(x).__name__)
def test_round_trip_of_populated_instance(instance: dto.AuthleteModel) -> None:
    """Nested objects, extra members, nulls and empty lists all survive a round trip."""
    restored = type(instance).from_json(instance.to_json())
    assert restored == instance
    assert restored.to_dict() == instance.to_dict()
