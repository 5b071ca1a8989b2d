"""User description used for flag evaluation and analytics events."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

# Wire name of each optional string attribute, paired with the field holding it,
# in the order they appear in serialized output.
_STRING_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("secondary", "secondary"),
    ("ip", "ip"),
    ("firstName", "first_name"),
    ("lastName", "last_name"),
    ("email", "email"),
    ("name", "name"),
    ("avatar", "avatar"),
    ("country", "country"),
)

_FIELD_BY_WIRE_NAME = dict(_STRING_ATTRIBUTES)


@dataclass
class User:
    """A user with built-in attributes, custom attributes and private names."""

    key: str
    anonymous: bool = False
    secondary: str | None = None
    ip: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    name: str | None = None
    avatar: str | None = None
    country: str | None = None
    custom: Any = None
    private_attribute_names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.key is None:
            raise ValueError("a user requires a key")

    def add_private_attribute(self, attribute: str) -> None:
        """Mark an attribute of this user as private."""
        if attribute is None:
            raise ValueError("attribute name is required")
        self.private_attribute_names.append(attribute)

    def is_private_attribute(
        self,
        attribute: str,
        all_attributes_private: bool = False,
        global_private_attribute_names: Iterable[str] | None = None,
    ) -> bool:
        """Whether an attribute must be hidden when redacting."""
        if all_attributes_private:
            return True
        if global_private_attribute_names is not None and attribute in global_private_attribute_names:
            return True
        return attribute in self.private_attribute_names

    def to_json(
        self,
        redact: bool = False,
        all_attributes_private: bool = False,
        global_private_attribute_names: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, optionally hiding private attributes."""
        global_names = (
            list(global_private_attribute_names)
            if global_private_attribute_names is not None
            else None
        )

        def private(attribute: str) -> bool:
            return redact and self.is_private_attribute(
                attribute, all_attributes_private, global_names
            )

        result: dict[str, Any] = {"key": self.key}
        if self.anonymous:
            result["anonymous"] = True

        hidden: list[str] = []
        for wire_name, field_name in _STRING_ATTRIBUTES:
            value = getattr(self, field_name)
            if value is None:
                continue
            if private(wire_name):
                hidden.append(wire_name)
            else:
                result[wire_name] = value

        if self.custom is not None:
            custom = copy.deepcopy(self.custom)
            if redact and isinstance(custom, dict):
                for name in list(custom):
                    if private(name):
                        hidden.append(name)
                        del custom[name]
            result["custom"] = custom

        if hidden:
            result["privateAttrs"] = hidden
        return result

    def value_of_attribute(self, attribute: str) -> Any:
        """Look up a built-in or custom attribute; None when absent."""
        if attribute == "key":
            return self.key
        if attribute == "anonymous":
            return self.anonymous
        field_name = _FIELD_BY_WIRE_NAME.get(attribute)
        if field_name is not None:
            return getattr(self, field_name)
        if isinstance(self.custom, dict) and attribute in self.custom:
            return copy.deepcopy(self.custom[attribute])
        return None