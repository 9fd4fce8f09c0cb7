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
DTOs of the authorization endpoint APIs.

``/auth/authorization`` parses an authorization request and returns a ticket.
After authenticating the end-user and obtaining consent, the authorization
server calls ``/auth/authorization/issue`` with the ticket, or
``/auth/authorization/fail`` to reject the request.
"""

from enum import StrEnum

from coreason_authlete.dto.base import ApiResponse, AuthleteModel, JsonText, format_summary, join
from coreason_authlete.dto.client import Client, Service
from coreason_authlete.dto.common import AuthzDetails, DynamicScope, Grant, Property, Scope, stringify_scope_names
from coreason_authlete.types import Display, GMAction, Prompt


class AuthorizationRequest(AuthleteModel):
    """
    Request to ``/auth/authorization``.

    Attributes:
        parameters (str | None): The authorization request parameters in
            ``application/x-www-form-urlencoded`` format (the query string of a GET
            request, or the body of a POST request).
        context (str | None): Arbitrary text kept with the ticket and returned later.
    """

    parameters: str | None = None
    context: str | None = None


class AuthorizationResponse(ApiResponse):
    """
    Response from ``/auth/authorization``.

    ``action`` tells the authorization server what to do next:

    * ``INTERNAL_SERVER_ERROR``: return 500 with ``response_content`` as JSON.
    * ``BAD_REQUEST``: return 400 with ``response_content`` as JSON.
    * ``LOCATION``: return 302 with ``response_content`` as the Location header.
    * ``FORM``: return 200 with ``response_content`` as an HTML form.
    * ``NO_INTERACTION``: ``prompt=none`` was requested; check the end-user's
      session and call ``/auth/authorization/issue`` or ``/auth/authorization/fail``
      without user interaction.
    * ``INTERACTION``: authenticate the end-user and obtain consent.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"
        NO_INTERACTION = "NO_INTERACTION"
        INTERACTION = "INTERACTION"

    action: Action | None = None
    service: Service | None = None
    client: Client | None = None
    display: Display | None = None
    max_age: int = 0
    scopes: list[Scope] | None = None
    dynamic_scopes: list[DynamicScope] | None = None
    ui_locales: list[str] | None = None
    claims_locales: list[str] | None = None
    claims: list[str] | None = None
    acr_essential: bool = False
    client_id_alias_used: bool = False
    acrs: list[str] | None = None
    subject: str | None = None
    login_hint: str | None = None
    lowest_prompt: Prompt | None = None
    prompts: list[Prompt] | None = None
    request_object_payload: str | None = None
    id_token_claims: str | None = None
    user_info_claims: str | None = None
    resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    purpose: str | None = None
    gm_action: GMAction | None = None
    grant_id: str | None = None
    grant_subject: str | None = None
    grant: Grant | None = None
    response_content: str | None = None
    ticket: str | None = None

    def summarize(self) -> str:
        client = self.client
        return format_summary(
            ticket=self.ticket,
            action=self.action,
            serviceNumber=client.service_number if client else 0,
            clientNumber=client.number if client else 0,
            clientId=client.client_id if client else 0,
            clientSecret=client.client_secret if client else None,
            clientType=client.client_type if client else None,
            developer=client.developer if client else None,
            display=self.display,
            maxAge=self.max_age,
            scopes=stringify_scope_names(self.scopes),
            uiLocales=join(self.ui_locales),
            claimsLocales=join(self.claims_locales),
            claims=join(self.claims),
            acrEssential=self.acr_essential,
            clientIdAliasUsed=self.client_id_alias_used,
            acrs=join(self.acrs),
            subject=self.subject,
            loginHint=self.login_hint,
            lowestPrompt=self.lowest_prompt,
            prompts=join(self.prompts),
        )


class AuthorizationIssueRequest(AuthleteModel):
    """
    Request to ``/auth/authorization/issue``.

    Attributes:
        ticket (str | None): The ticket issued by ``/auth/authorization``.
        subject (str | None): The subject (unique identifier) of the authenticated end-user.
        sub (str | None): Value of the ``sub`` claim of the ID token, if it should differ from ``subject``.
        auth_time (int): Time of end-user authentication in seconds since the Unix epoch.
        acr (str | None): The authentication context class reference that was satisfied.
        claims (str | None): Claim values as a JSON object. A dict is accepted as well.
        properties (list[Property] | None): Extra properties associated with the tokens.
        scopes (list[str] | None): Scopes replacing the requested ones. ``None`` keeps the
            requested scopes; an empty list grants no scope.
        idt_header_params (str | None): Extra JWS header parameters of the ID token as a JSON object.
        authorization_details (AuthzDetails | None): Replacement for the requested authorization details.
        consented_claims (list[str] | None): Claims the end-user consented to.
        claims_for_tx (str | None): Claim values for transformed claims, as a JSON object.
        verified_claims_for_tx (list[str] | None): Verified claims for transformed claims,
            each a JSON object.
    """

    ticket: str | None = None
    subject: str | None = None
    sub: str | None = None
    auth_time: int = 0
    acr: str | None = None
    claims: JsonText = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    idt_header_params: JsonText = None
    authorization_details: AuthzDetails | None = None
    consented_claims: list[str] | None = None
    claims_for_tx: JsonText = None
    verified_claims_for_tx: list[str] | None = None


class AuthorizationIssueResponse(ApiResponse):
    """
    Response from ``/auth/authorization/issue``.

    On ``LOCATION`` or ``FORM`` the authorization response was built successfully
    and ``response_content`` carries it.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"

    action: Action | None = None
    response_content: str | None = None
    access_token: str | None = None
    access_token_expires_at: int = 0
    access_token_duration: int = 0
    id_token: str | None = None
    authorization_code: str | None = None
    jwt_access_token: str | None = None

    def summarize(self) -> str:
        return format_summary(
            action=self.action,
            responseContent=self.response_content,
            accessToken=self.access_token,
            accessTokenExpiresAt=self.access_token_expires_at,
            accessTokenDuration=self.access_token_duration,
            idToken=self.id_token,
            authorizationCode=self.authorization_code,
            jwtAccessToken=self.jwt_access_token,
        )


class AuthorizationFailRequest(AuthleteModel):
    """Request to ``/auth/authorization/fail``."""

    class Reason(StrEnum):
        UNKNOWN = "UNKNOWN"
        NOT_LOGGED_IN = "NOT_LOGGED_IN"
        MAX_AGE_NOT_SUPPORTED = "MAX_AGE_NOT_SUPPORTED"
        EXCEEDS_MAX_AGE = "EXCEEDS_MAX_AGE"
        DIFFERENT_SUBJECT = "DIFFERENT_SUBJECT"
        ACR_NOT_SATISFIED = "ACR_NOT_SATISFIED"
        DENIED = "DENIED"
        SERVER_ERROR = "SERVER_ERROR"
        NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
        ACCOUNT_SELECTION_REQUIRED = "ACCOUNT_SELECTION_REQUIRED"
        CONSENT_REQUIRED = "CONSENT_REQUIRED"
        INTERACTION_REQUIRED = "INTERACTION_REQUIRED"
        INVALID_TARGET = "INVALID_TARGET"

    ticket: str | None = None
    reason: Reason | None = None
    description: str | None = None


class AuthorizationFailResponse(ApiResponse):
    """Response from ``/auth/authorization/fail``."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"

    action: Action | None = None
    response_content: str | None = None

    def summarize(self) -> str:
        return format_summary(action=self.action, responseContent=self.response_content)
