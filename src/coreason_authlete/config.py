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
Configuration for the coreason-authlete package.
"""

from enum import StrEnum

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiVersion(StrEnum):
    V2 = "V2"
    V3 = "V3"


class AuthleteConfig(BaseSettings):
    """
    Connection settings for the Authlete API.

    Values are read from the environment (``AUTHLETE_BASE_URL``,
    ``AUTHLETE_SERVICE_APIKEY``, ``AUTHLETE_SERVICE_APISECRET``,
    ``AUTHLETE_SERVICE_ACCESSTOKEN``, ``AUTHLETE_API_VERSION``,
    ``AUTHLETE_HTTP_TIMEOUT``, ``AUTHLETE_UNSAFE_LOCAL_DEV``) or passed as
    keyword arguments.

    Attributes:
        base_url (str): Base URL of the Authlete API, e.g. https://us.authlete.com.
        api_key (str | None): The service API key. With API V3 this is the service ID.
        api_secret (SecretStr | None): The service API secret (API V2 only).
        access_token (SecretStr | None): The service access token (API V3 only).
        api_version (ApiVersion): Which generation of the API to call.
        http_timeout (float): Timeout in seconds for every API call.
        unsafe_local_dev (bool): Allow plain HTTP for a local Authlete server.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHLETE_",
        case_sensitive=False,
        populate_by_name=True,
    )

    base_url: str
    api_key: str | None = Field(default=None, validation_alias="AUTHLETE_SERVICE_APIKEY")
    api_secret: SecretStr | None = Field(default=None, validation_alias="AUTHLETE_SERVICE_APISECRET")
    access_token: SecretStr | None = Field(default=None, validation_alias="AUTHLETE_SERVICE_ACCESSTOKEN")
    api_version: ApiVersion = ApiVersion.V3
    http_timeout: float = Field(default=10.0, gt=0, description="Timeout in seconds for Authlete API calls.")
    unsafe_local_dev: bool = False

    @field_validator("base_url", mode="after")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """
        Strips trailing slashes and rejects schemes other than https and http.
        """
        v = v.strip().rstrip("/")
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"Invalid base URL '{v}': the scheme must be https.")
        return v

    @model_validator(mode="after")
    def check_credentials(self) -> "AuthleteConfig":
        """
        Checks the base URL scheme and that the credentials needed by the API version are present.
        """
        if self.base_url.startswith("http://") and not self.unsafe_local_dev:
            raise ValueError("HTTPS is required for production. Set 'unsafe_local_dev=True' only for local testing.")

        if not self.api_key:
            raise ValueError("The service API key (AUTHLETE_SERVICE_APIKEY) is required.")

        if self.api_version is ApiVersion.V3 and self.access_token is None:
            raise ValueError("API V3 requires the service access token (AUTHLETE_SERVICE_ACCESSTOKEN).")

        if self.api_version is ApiVersion.V2 and self.api_secret is None:
            raise ValueError("API V2 requires the service API secret (AUTHLETE_SERVICE_APISECRET).")

        return self
