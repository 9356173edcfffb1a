"""Validation engine.

Runs the registered rules of each field against a record and collects the
messages of the rules that failed.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..values import is_empty
from .dispatch import FieldContext, invoke
from .registry import RuleRegistry
from .rules import DEFAULT_MESSAGES, Phase

logger = logging.getLogger(__name__)


class Validator:
    """Validates records against per-field rules.

    Example:
        validator = Validator()
        validator.add("email", ["required", "email"])
        errors = validator.validate({"email": "jim@acme.io"})
    """

    def __init__(self, registry: RuleRegistry | None = None):
        self.registry = registry if registry is not None else RuleRegistry()

    def add(self, field: str, name, **options: Any) -> "Validator":
        """Add rules to a field, see :meth:`RuleRegistry.add`."""
        self.registry.add(field, name, **options)
        return self

    def remove(self, field: str, name: str | None = None) -> "Validator":
        self.registry.remove(field, name)
        return self

    def rules(self, field: str | None = None) -> dict:
        return self.registry.rules(field)

    def validate(self, data: Mapping[str, Any], phase: Phase | str = Phase.CREATE) -> dict[str, list[str]]:
        """Validate a record.

        Args:
            data: Field name to value
            phase: Phase.CREATE for new records, Phase.UPDATE for existing ones

        Returns:
            Field name to the messages of its failed rules, in rule order.
            Fields without failures are left out.

        Raises:
            RuleConfigError: If a rule is misconfigured, e.g. unknown primitive
        """
        phase = Phase(phase)
        errors: dict[str, list[str]] = {}

        for field, field_rules in self.registry.rules().items():
            messages = self._validate_field(field, field_rules.values(), data, phase)
            if messages:
                errors[field] = messages

        logger.debug(f"Validated {len(data)} values ({phase.value}): {len(errors)} field(s) failed")
        return errors

    def _validate_field(self, field: str, specs, data: Mapping[str, Any], phase: Phase) -> list[str]:
        present = field in data
        value = data.get(field)
        empty = is_empty(value)
        context = FieldContext(field, data)
        messages: list[str] = []

        for spec in specs:
            if not spec.applies_to(phase):
                continue

            # required, optional and present end the field when they trip
            special = spec.special
            if special == "required":
                if not present or empty:
                    messages.append(spec.message)
                    break
                continue
            if special == "optional":
                if not present or empty:
                    break
                continue
            if special == "present":
                if not present:
                    messages.append(spec.message)
                    break
                continue

            if spec.present and not present:
                messages.append(DEFAULT_MESSAGES["present"])
                if spec.stop_on_fail:
                    break
                continue

            if spec.allow_empty and empty:
                continue

            if not invoke(spec.reference, value, context):
                logger.debug(f"Field {field} failed rule {spec.name}")
                messages.append(spec.message)
                if spec.stop_on_fail:
                    break

        return messages

