"""Rule data model: phases, rule references and registered rule specs."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..errors import InvalidRuleError

FALLBACK_MESSAGE = "Invalid value"

# Rules handled by the engine itself rather than by a primitive
SPECIAL_RULES = frozenset({"required", "optional", "present"})

DEFAULT_MESSAGES: dict[str, str] = {
    "accepted": "This must be accepted",
    "alpha": "This value can only contain letters",
    "alpha_numeric": "This value can only contain letters and numbers",
    "array": "This value must be an array",
    "boolean": "This value must be true or false",
    "confirm": "The confirmed value does not match",
    "credit_card": "Invalid credit card number",
    "date": "Invalid date",
    "date_format": "Invalid date format",
    "datetime": "Invalid datetime",
    "email": "Invalid email address",
    "extension": "Invalid file extension",
    "fqdn": "Invalid domain",
    "hex_color": "Invalid hex color",
    "iban": "Invalid IBAN",
    "in": "Invalid value",
    "integer": "This value must be an integer",
    "ip": "Invalid IP address",
    "ip_range": "Invalid IP address",
    "json": "Invalid JSON string",
    "mac_address": "Invalid MAC address",
    "mime_type": "Invalid mime type",
    "not_blank": "This field cannot be blank",
    "not_empty": "This field cannot be empty",
    "not_in": "Invalid value",
    "numeric": "This value must be a number",
    "present": "This field must be present",
    "required": "This field is required",
    "time": "Invalid time",
    "upload": "File upload error",
    "url": "Invalid URL",
    "uuid": "Invalid UUID string",
}


class Phase(str, Enum):
    """Whether a record is being created or updated."""
    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class Named:
    """A primitive called with the field value only."""
    name: str


@dataclass(frozen=True)
class NamedWithArgs:
    """A primitive called with the field value followed by ``args``."""
    name: str
    args: tuple = ()


@dataclass(frozen=True)
class BoundCall:
    """A method of ``handle`` called with the field value followed by ``args``."""
    handle: Any
    method: str
    args: tuple = ()


@dataclass(frozen=True)
class Predicate:
    """A caller supplied single argument check."""
    func: Callable[[Any], Any]


RuleReference = Union[Named, NamedWithArgs, BoundCall, Predicate]


def make_reference(rule: Any) -> RuleReference:
    """Normalize the accepted rule shapes into a RuleReference.

    Accepted shapes:
        - "email": a primitive by name
        - ("in", ["a", "b"]): a primitive with extra arguments
        - (obj, "method", *args): a method on an object, looked up when the rule runs
        - any callable: a predicate taking the value

    Raises:
        InvalidRuleError: If the rule has none of these shapes
    """
    if isinstance(rule, (Named, NamedWithArgs, BoundCall, Predicate)):
        return rule
    if isinstance(rule, str):
        return Named(rule)
    if isinstance(rule, (list, tuple)) and rule:
        head, *args = rule
        if isinstance(head, str):
            return NamedWithArgs(head, tuple(args))
        if args and isinstance(args[0], str):
            return BoundCall(head, args[0], tuple(args[1:]))
        raise InvalidRuleError(f"Rule {rule!r} is neither a named rule nor an (object, method) pair")
    if callable(rule):
        return Predicate(rule)
    raise InvalidRuleError(f"Unsupported rule: {rule!r}")


def rule_name(reference: RuleReference) -> str | None:
    """Primitive name a reference points at, if any."""
    if isinstance(reference, (Named, NamedWithArgs)):
        return reference.name
    return None


def default_message(reference: RuleReference) -> str:
    return DEFAULT_MESSAGES.get(rule_name(reference), FALLBACK_MESSAGE)


@dataclass(frozen=True)
class RuleSpec:
    """A rule registered on a field."""
    name: str
    reference: RuleReference
    message: str
    on: Phase | None = None
    present: bool = False
    allow_empty: bool = False
    stop_on_fail: bool = False

    @property
    def special(self) -> str | None:
        """Name of the engine-handled rule this spec is, if any."""
        name = rule_name(self.reference)
        if isinstance(self.reference, Named) and name in SPECIAL_RULES:
            return name
        return None

    def applies_to(self, phase: Phase) -> bool:
        return self.on is None or self.on == phase

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return {
            "name": self.name,
            "rule": rule_name(self.reference) or type(self.reference).__name__.lower(),
            "message": self.message,
            "on": self.on.value if self.on else None,
            "present": self.present,
            "allow_empty": self.allow_empty,
            "stop_on_fail": self.stop_on_fail,
        }
