# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authlete

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
from coreason_authlete.types import DeliveryMode, UserIdentificationHintType

BACKCHANNEL_RESPONSE = {
    "resultCode": "A179001",
    "action": "USER_IDENTIFICATION",
    "clientId": 57297408867,
    "clientName": "Bank App",
    "deliveryMode": "POLL",
    "scopes": [{"name": "openid"}],
    "hintType": "LOGIN_HINT",
    "hint": "alice@example.com",
    "bindingMessage": "BIND-1234",
    "warnings": ["user_code is ignored"],
    "ticket": "ticket-1",
}


def test_backchannel_request() -> None:
    request = BackchannelAuthenticationRequest(
        parameters="login_hint=alice&scope=openid", client_id="c", client_secret="s"
    )
    assert request.to_dict() == {"parameters": "login_hint=alice&scope=openid", "clientId": "c", "clientSecret": "s"}


def test_backchannel_response() -> None:
    response = BackchannelAuthenticationResponse.from_dict(BACKCHANNEL_RESPONSE)

    assert response.action is BackchannelAuthenticationResponse.Action.USER_IDENTIFICATION
    assert response.delivery_mode is DeliveryMode.POLL
    assert response.hint_type is UserIdentificationHintType.LOGIN_HINT
    assert response.warnings == ["user_code is ignored"]
    assert response.summarize() == (
        "action=USER_IDENTIFICATION, clientId=57297408867, clientIdAlias=null, clientIdAliasUsed=false, "
        "deliveryMode=poll, scopes=openid, claimNames=null, acrs=null, hintType=login_hint, "
        "hint=alice@example.com, sub=null, bindingMessage=BIND-1234, ticket=ticket-1"
    )


def test_backchannel_issue() -> None:
    assert BackchannelAuthenticationIssueRequest(ticket="ticket-1").to_dict() == {"ticket": "ticket-1"}

    response = BackchannelAuthenticationIssueResponse.from_dict(
        {"action": "OK", "authReqId": "req-1", "expiresIn": 120, "interval": 5}
    )
    assert response.auth_req_id == "req-1"
    assert response.summarize() == "action=OK, authReqId=req-1, expiresIn=120, interval=5"


def test_backchannel_fail() -> None:
    request = BackchannelAuthenticationFailRequest(
        ticket="ticket-1",
        reason=BackchannelAuthenticationFailRequest.Reason.UNKNOWN_USER_ID,
        uri="https://as.example/errors/unknown",
    )
    assert request.to_dict() == {
        "ticket": "ticket-1",
        "reason": "UNKNOWN_USER_ID",
        "uri": "https://as.example/errors/unknown",
    }

    response = BackchannelAuthenticationFailResponse.from_dict({"action": "FORBIDDEN", "responseContent": "{}"})
    assert response.action is BackchannelAuthenticationFailResponse.Action.FORBIDDEN


def test_backchannel_complete_request() -> None:
    result_type = BackchannelAuthenticationCompleteRequest.Result
    request = BackchannelAuthenticationCompleteRequest().set(
        ticket="ticket-1",
        result=result_type.AUTHORIZED,
        subject="alice",
        claims={"name": "Alice"},
    )

    assert request.to_dict() == {
        "ticket": "ticket-1",
        "result": "AUTHORIZED",
        "subject": "alice",
        "claims": '{"name":"Alice"}',
    }
    assert request.result is not None and request.result.code == 1


def test_backchannel_complete_empty_claims() -> None:
    """An empty claims object means no claims."""
    request = BackchannelAuthenticationCompleteRequest().set(claims={})
    assert request.claims is None


def test_backchannel_complete_request_access_denied() -> None:
    request = BackchannelAuthenticationCompleteRequest.from_dict(
        {"ticket": "ticket-1", "result": "ACCESS_DENIED", "errorDescription": "denied by user"}
    )
    assert request.result is BackchannelAuthenticationCompleteRequest.Result.ACCESS_DENIED
    assert request.error_description == "denied by user"


def test_backchannel_complete_response() -> None:
    response = BackchannelAuthenticationCompleteResponse.from_dict(
        {
            "action": "NOTIFICATION",
            "responseContent": '{"auth_req_id":"req-1"}',
            "clientNotificationEndpoint": "https://client.example/ciba",
            "clientNotificationToken": "notification-token",
        }
    )

    assert response.action is BackchannelAuthenticationCompleteResponse.Action.NOTIFICATION
    assert response.client_notification_token == "notification-token"
    assert response.summarize() == (
        'action=NOTIFICATION, responseContent={"auth_req_id":"req-1"}, '
        "clientNotificationEndpoint=https://client.example/ciba"
    )
