"""Turn a rule reference into a call and run it."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import UnknownRuleError
from ..primitives import RECORD_PRIMITIVES, get_primitive
from .rules import BoundCall, Named, NamedWithArgs, Predicate, RuleReference


@dataclass(frozen=True)
class FieldContext:
    """The field being validated and the record it belongs to."""
    field: str
    data: Mapping[str, Any]


def resolve(reference: RuleReference, context: FieldContext) -> tuple[Callable[..., Any], tuple]:
    """Resolve a reference into a callable and the arguments following the value.

    Raises:
        UnknownRuleError: If the primitive or method does not exist
    """
    if isinstance(reference, Predicate):
        return reference.func, ()

    if isinstance(reference, BoundCall):
        method = getattr(reference.handle, reference.method, None)
        if not callable(method):
            raise UnknownRuleError(
                f"{type(reference.handle).__name__} has no method {reference.method}"
            )
        return method, reference.args

    if isinstance(reference, (Named, NamedWithArgs)):
        func = get_primitive(reference.name)
        args = reference.args if isinstance(reference, NamedWithArgs) else ()
        if reference.name in RECORD_PRIMITIVES:
            args = (context.field, context.data, *args)
        return func, args

    raise UnknownRuleError(f"Invalid validation rule: {reference!r}")


def invoke(reference: RuleReference, value: Any, context: FieldContext) -> bool:
    """Run the rule against ``value`` and return its verdict."""
    func, args = resolve(reference, context)
    return bool(func(value, *args))
