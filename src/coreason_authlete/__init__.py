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
Typed request and response objects of the Authlete API, with a thin client to send them.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .api import AuthleteApi, AuthleteApiAsync
from .config import ApiVersion, AuthleteConfig
from .exceptions import (
    AuthleteApiError,
    CoreasonAuthleteError,
    JsonFormatError,
    MetadataFormatError,
    OversizedResponseError,
)

__all__ = [
    "ApiVersion",
    "AuthleteApi",
    "AuthleteApiAsync",
    "AuthleteApiError",
    "AuthleteConfig",
    "CoreasonAuthleteError",
    "JsonFormatError",
    "MetadataFormatError",
    "OversizedResponseError",
]
