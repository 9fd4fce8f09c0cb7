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
Closed-set protocol values shared by the DTOs.

Every member has two representations: the standard string used on the wire
(e.g. ``"client_credentials"``) and the short numeric code Authlete uses
internally (e.g. ``4``).
"""

from enum import StrEnum
from typing import Any, Self


class CodedEnum(StrEnum):
    """
    StrEnum whose members are declared as ``(wire_string, code)``.

    Input lookup also accepts the constant name (``"CLIENT_CREDENTIALS"``),
    which is how older API payloads spell these values, and the numeric code.
    """

    code: int

    def __new__(cls, text: str, code: int) -> Self:
        member = str.__new__(cls, text)
        member._value_ = text
        member.code = code
        return member

    @classmethod
    def _missing_(cls, value: Any) -> Self | None:
        if isinstance(value, str):
            return cls.__members__.get(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_code(value)
        return None

    @classmethod
    def parse(cls, text: str | None) -> Self | None:
        """Returns the member whose wire string is ``text``, or None."""
        if text is None:
            return None
        for member in cls:
            if member.value == text:
                return member
        return None

    @classmethod
    def from_code(cls, code: int) -> Self | None:
        """Returns the member with the given numeric code, or None."""
        for member in cls:
            if member.code == code:
                return member
        return None


class GrantType(CodedEnum):
    AUTHORIZATION_CODE = ("authorization_code", 1)
    IMPLICIT = ("implicit", 2)
    PASSWORD = ("password", 3)
    CLIENT_CREDENTIALS = ("client_credentials", 4)
    REFRESH_TOKEN = ("refresh_token", 5)
    CIBA = ("urn:openid:params:grant-type:ciba", 6)
    DEVICE_CODE = ("urn:ietf:params:oauth:grant-type:device_code", 7)


class ClientAuthMethod(CodedEnum):
    NONE = ("none", 0)
    CLIENT_SECRET_BASIC = ("client_secret_basic", 1)
    CLIENT_SECRET_POST = ("client_secret_post", 2)
    CLIENT_SECRET_JWT = ("client_secret_jwt", 3)
    PRIVATE_KEY_JWT = ("private_key_jwt", 4)
    TLS_CLIENT_AUTH = ("tls_client_auth", 5)
    SELF_SIGNED_TLS_CLIENT_AUTH = ("self_signed_tls_client_auth", 6)


class DeliveryMode(CodedEnum):
    """Backchannel token delivery mode (CIBA)."""

    POLL = ("poll", 1)
    PING = ("ping", 2)
    PUSH = ("push", 3)


class UserIdentificationHintType(CodedEnum):
    """Which hint a backchannel authentication request carried."""

    ID_TOKEN_HINT = ("id_token_hint", 1)
    LOGIN_HINT = ("login_hint", 2)
    LOGIN_HINT_TOKEN = ("login_hint_token", 3)


class TokenType(CodedEnum):
    """Token type identifiers (RFC 8693)."""

    JWT = ("urn:ietf:params:oauth:token-type:jwt", 1)
    ACCESS_TOKEN = ("urn:ietf:params:oauth:token-type:access_token", 2)
    REFRESH_TOKEN = ("urn:ietf:params:oauth:token-type:refresh_token", 3)
    ID_TOKEN = ("urn:ietf:params:oauth:token-type:id_token", 4)
    SAML1 = ("urn:ietf:params:oauth:token-type:saml1", 5)
    SAML2 = ("urn:ietf:params:oauth:token-type:saml2", 6)
    DEVICE_SECRET = ("urn:openid:params:token-type:device-secret", 7)


class Display(CodedEnum):
    PAGE = ("page", 1)
    POPUP = ("popup", 2)
    TOUCH = ("touch", 3)
    WAP = ("wap", 4)


class Prompt(CodedEnum):
    NONE = ("none", 0)
    LOGIN = ("login", 1)
    CONSENT = ("consent", 2)
    SELECT_ACCOUNT = ("select_account", 3)
    CREATE = ("create", 4)


class GMAction(CodedEnum):
    """Grant management action (FAPI Grant Management)."""

    CREATE = ("create", 1)
    QUERY = ("query", 2)
    REPLACE = ("replace", 3)
    REVOKE = ("revoke", 4)
    UPDATE = ("update", 5)


class SubjectType(CodedEnum):
    PUBLIC = ("public", 1)
    PAIRWISE = ("pairwise", 2)


class ClientType(CodedEnum):
    PUBLIC = ("public", 1)
    CONFIDENTIAL = ("confidential", 2)


class ApplicationType(CodedEnum):
    WEB = ("web", 1)
    NATIVE = ("native", 2)


class Sns(CodedEnum):
    FACEBOOK = ("facebook", 1)


class ResponseType(CodedEnum):
    NONE = ("none", 0)
    CODE = ("code", 1)
    TOKEN = ("token", 2)
    ID_TOKEN = ("id_token", 3)
    CODE_TOKEN = ("code token", 4)
    CODE_ID_TOKEN = ("code id_token", 5)
    ID_TOKEN_TOKEN = ("id_token token", 6)
    CODE_ID_TOKEN_TOKEN = ("code id_token token", 7)


class JWSAlg(CodedEnum):
    NONE = ("none", 0)
    HS256 = ("HS256", 1)
    HS384 = ("HS384", 2)
    HS512 = ("HS512", 3)
    RS256 = ("RS256", 4)
    RS384 = ("RS384", 5)
    RS512 = ("RS512", 6)
    ES256 = ("ES256", 7)
    ES384 = ("ES384", 8)
    ES512 = ("ES512", 9)
    PS256 = ("PS256", 10)
    PS384 = ("PS384", 11)
    PS512 = ("PS512", 12)


class JWEAlg(CodedEnum):
    """Key management algorithms for JWE (RFC 7518, 4.1)."""

    RSA1_5 = ("RSA1_5", 1)
    RSA_OAEP = ("RSA-OAEP", 2)
    RSA_OAEP_256 = ("RSA-OAEP-256", 3)
    A128KW = ("A128KW", 4)
    A192KW = ("A192KW", 5)
    A256KW = ("A256KW", 6)
    DIR = ("dir", 7)
    ECDH_ES = ("ECDH-ES", 8)
    ECDH_ES_A128KW = ("ECDH-ES+A128KW", 9)
    ECDH_ES_A192KW = ("ECDH-ES+A192KW", 10)
    ECDH_ES_A256KW = ("ECDH-ES+A256KW", 11)
    A128GCMKW = ("A128GCMKW", 12)
    A192GCMKW = ("A192GCMKW", 13)
    A256GCMKW = ("A256GCMKW", 14)
    PBES2_HS256_A128KW = ("PBES2-HS256+A128KW", 15)
    PBES2_HS384_A192KW = ("PBES2-HS384+A192KW", 16)
    PBES2_HS512_A256KW = ("PBES2-HS512+A256KW", 17)


class JWEEnc(CodedEnum):
    """Content encryption algorithms for JWE (RFC 7518, 5.1)."""

    A128CBC_HS256 = ("A128CBC-HS256", 1)
    A192CBC_HS384 = ("A192CBC-HS384", 2)
    A256CBC_HS512 = ("A256CBC-HS512", 3)
    A128GCM = ("A128GCM", 4)
    A192GCM = ("A192GCM", 5)
    A256GCM = ("A256GCM", 6)


class ClaimMatchOperation(CodedEnum):
    PROHIBITED = ("prohibited", 1)
    PRESENT = ("present", 2)
    EQUALS = ("equals", 3)


class ClaimRuleOperation(CodedEnum):
    PROHIBITED = ("prohibited", 1)
    PRESENT = ("present", 2)
    EQUALS = ("equals", 3)
