"""Rule registration and the validation engine.

A field's rules run in the order they were added. The special rules
``required``, ``optional`` and ``present`` are handled by the engine; every
other rule dispatches to a primitive, a bound method or a predicate.
"""

from .dispatch import FieldContext, invoke, resolve
from .framework import Validator
from .registry import RuleRegistry
from .rules import (
    DEFAULT_MESSAGES,
    FALLBACK_MESSAGE,
    BoundCall,
    Named,
    NamedWithArgs,
    Phase,
    Predicate,
    RuleReference,
    RuleSpec,
    make_reference,
)

__all__ = [
    "Validator",
    "RuleRegistry",
    "RuleSpec",
    "RuleReference",
    "Named",
    "NamedWithArgs",
    "BoundCall",
    "Predicate",
    "Phase",
    "FieldContext",
    "DEFAULT_MESSAGES",
    "FALLBACK_MESSAGE",
    "make_reference",
    "resolve",
    "invoke",
]
