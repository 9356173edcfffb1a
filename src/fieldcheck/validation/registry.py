"""Per-field rule registry."""

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import DuplicateRuleError, InvalidRuleError, MissingRuleNameError
from .rules import Phase, RuleSpec, default_message, make_reference

logger = logging.getLogger(__name__)

RULE_OPTIONS = frozenset({"rule", "message", "on", "present", "allow_empty", "stop_on_fail"})


def _parse_phase(value: Any) -> Phase | None:
    if value is None or isinstance(value, Phase):
        return value
    try:
        return Phase(value)
    except ValueError:
        raise InvalidRuleError(f"Invalid phase {value!r}, must be one of: create, update") from None


class RuleRegistry:
    """Ordered rules per field.

    Insertion order within a field is evaluation order. A ``(field, name)``
    pair can only be registered once; remove a rule before replacing it.
    """

    def __init__(self):
        self._rules: dict[str, dict[str, RuleSpec]] = {}

    def add(self, field: str, name: str | list | tuple | Mapping, **options: Any) -> "RuleRegistry":
        """Add one or more rules to a field.

        Examples:
            registry.add("name", "not_empty")
            registry.add("email", "email", message="Invalid email address")
            registry.add("code", "valid", rule=("in", [1, 2, 3]))
            registry.add("email", ["required", {"name": "email", "stop_on_fail": True}])
            registry.add("email", {"required": None, "email": {"allow_empty": True}})

        Args:
            field: Name of the field to validate
            name: Rule name, a list of rule names / option mappings carrying a
                  "name" key, or a mapping of rule name to options
            **options: Options for a single rule:
                - rule: primitive name, (name, *args), (obj, "method", *args) or a callable
                - message: error message when the rule fails
                - on: "create" or "update" to only run in that phase
                - present: the field key must be present (it can be empty)
                - allow_empty: pass without checking when the value is empty
                - stop_on_fail: skip the remaining rules of the field on failure

        Returns:
            The registry, for chaining

        Raises:
            DuplicateRuleError: If the field already has a rule with that name
            MissingRuleNameError: If a rule in a list has no name
            InvalidRuleError: If a rule or option has an unsupported shape
        """
        if isinstance(name, str):
            entries = [(name, options)]
        else:
            if options:
                raise InvalidRuleError("Options must be given per rule when adding several rules")
            entries = self._expand(name)

        # Build and check the whole batch before registering any of it
        field_rules = self._rules.get(field, {})
        specs: dict[str, RuleSpec] = {}
        for rule_name, rule_options in entries:
            if rule_name in field_rules or rule_name in specs:
                raise DuplicateRuleError(field, rule_name)
            specs[rule_name] = self._build_spec(rule_name, rule_options)

        if specs:
            self._rules.setdefault(field, {}).update(specs)
        logger.debug(f"Added rule(s) {', '.join(specs)} to field {field}")
        return self

    @staticmethod
    def _expand(rules: list | tuple | Mapping) -> list[tuple[str, Mapping]]:
        if isinstance(rules, Mapping):
            entries = []
            for rule_name, rule_options in rules.items():
                if not isinstance(rule_name, str):
                    raise MissingRuleNameError("A rule must have a name key")
                entries.append((rule_name, rule_options or {}))
            return entries

        if not isinstance(rules, (list, tuple)):
            raise InvalidRuleError(f"Unsupported rule definition: {rules!r}")

        entries = []
        for item in rules:
            if isinstance(item, str):
                entries.append((item, {}))
            elif isinstance(item, Mapping):
                rule_options = dict(item)
                rule_name = rule_options.pop("name", None)
                if not isinstance(rule_name, str):
                    raise MissingRuleNameError("A rule must have a name key")
                entries.append((rule_name, rule_options))
            else:
                raise MissingRuleNameError(f"A rule must have a name key, got {item!r}")
        return entries

    @staticmethod
    def _build_spec(name: str, options: Mapping) -> RuleSpec:
        if not isinstance(options, Mapping):
            raise InvalidRuleError(f"Options for rule {name} must be a mapping")

        unknown = set(options) - RULE_OPTIONS
        if unknown:
            raise InvalidRuleError(f"Unknown option(s) for rule {name}: {', '.join(sorted(unknown))}")

        reference = make_reference(options.get("rule", name))
        message = options.get("message")
        return RuleSpec(
            name=name,
            reference=reference,
            message=message if message is not None else default_message(reference),
            on=_parse_phase(options.get("on")),
            present=bool(options.get("present", False)),
            allow_empty=bool(options.get("allow_empty", False)),
            stop_on_fail=bool(options.get("stop_on_fail", False)),
        )

    def remove(self, field: str, name: str | None = None) -> "RuleRegistry":
        """Remove one rule of a field, or all of them when ``name`` is None.

        Removing something that is not registered does nothing.
        """
        if name is None:
            self._rules.pop(field, None)
        elif field in self._rules:
            self._rules[field].pop(name, None)
            if not self._rules[field]:
                del self._rules[field]
        logger.debug(f"Removed rule {name or '*'} from field {field}")
        return self

    def rules(self, field: str | None = None) -> dict:
        """Snapshot of the registered rules.

        Returns:
            ``{rule_name: RuleSpec}`` for one field (empty if it has none), or
            ``{field: {rule_name: RuleSpec}}`` for every field
        """
        if field is not None:
            return dict(self._rules.get(field, {}))
        return {name: dict(field_rules) for name, field_rules in self._rules.items()}

    def fields(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, field: object) -> bool:
        return field in self._rules

    def __len__(self) -> int:
        return sum(len(field_rules) for field_rules in self._rules.values())
