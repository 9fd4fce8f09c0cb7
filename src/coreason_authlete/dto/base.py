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
Base model and shared helpers for every Authlete DTO.
"""

import json
from collections.abc import Iterable
from enum import Enum
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from coreason_authlete.exceptions import JsonFormatError
from coreason_authlete.utils.logger import logger


def to_json_text(value: Any) -> str:
    """Serializes a structured value into compact JSON text."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def parse_json_text(text: str, name: str, expected: type | tuple[type, ...] = (dict, list)) -> Any:
    """
    Parses JSON text held by a DTO field.

    Args:
        text: The JSON text.
        name: Name of the field, used in the error message.
        expected: The Python type(s) the parsed value must have.

    Returns:
        The parsed value.

    Raises:
        JsonFormatError: If the text is not valid JSON or has the wrong JSON type.
    """
    try:
        value = json.loads(text)
    except (TypeError, ValueError) as e:
        raise JsonFormatError(f"The value of '{name}' is not valid JSON: {e}") from e

    if not isinstance(value, expected):
        raise JsonFormatError(f"The value of '{name}' has an unexpected JSON type ({type(value).__name__}).")

    return value


def _coerce_json_text(value: Any) -> Any:
    # An empty structure means "not specified", like a null map.
    if isinstance(value, (dict, list, tuple)):
        return to_json_text(value) if value else None
    return value


JsonText = Annotated[str | None, BeforeValidator(_coerce_json_text)]
"""A string field holding raw JSON. Also accepts a dict or list, which is serialized."""


def join(values: Iterable[Any] | None, delimiter: str = " ") -> str | None:
    if values is None:
        return None
    return delimiter.join(str(value) for value in values)


def stringify(value: Any) -> str:
    """Formats a field value the way summaries print it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def format_summary(**entries: Any) -> str:
    """Builds a log-friendly ``name=value, name=value`` line."""
    return ", ".join(f"{name}={stringify(value)}" for name, value in entries.items())


class AuthleteModel(BaseModel):
    """
    Base class of every request, response and value object.

    Python attributes are snake_case; the wire names are the camelCase names of the
    Authlete API. Both spellings are accepted on input. Values are validated on
    assignment, and fields that were never set are left out of the wire form, so
    "absent", ``null`` and ``[]`` stay distinguishable.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    def set(self, **values: Any) -> Self:
        """
        Sets one or more fields and returns this same instance.

        Example:
            request = TokenIssueRequest().set(ticket=ticket, subject="user-1")
        """
        for name, value in values.items():
            setattr(self, name, value)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Returns the wire form as a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self, indent: int | None = None) -> str:
        """Returns the wire form as JSON text."""
        return self.model_dump_json(by_alias=True, exclude_unset=True, indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        return cls.model_validate_json(data)


class ApiResponse(AuthleteModel):
    """
    Common part of every Authlete API response.

    Attributes:
        result_code (str | None): Code identifying the result, e.g. ``A004001``.
        result_message (str | None): Human-readable description of the result.
    """

    result_code: str | None = None
    result_message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_unknown_action(cls, data: Any) -> Any:
        """
        Maps an ``action`` this version does not know to None.

        A newer Authlete server may reply with actions added after this release;
        the rest of the response is still usable.
        """
        action_type = getattr(cls, "Action", None)
        if not isinstance(data, dict) or action_type is None:
            return data

        action = data.get("action")
        if not isinstance(action, str) or action in {member.value for member in action_type}:
            return data

        logger.warning(f"Unknown action '{action}' in {cls.__name__}, treating it as null.")
        return {**data, "action": None}
