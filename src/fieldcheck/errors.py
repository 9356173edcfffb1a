"""Configuration errors raised by fieldcheck.

Bad input data never raises: it ends up as messages in the validation result.
The exceptions below signal mistakes in how the rules were set up, or an
opt-in I/O check that could not complete, and are never recovered locally.
"""


class RuleConfigError(ValueError):
    """Base class for rule setup mistakes."""
    pass


class DuplicateRuleError(RuleConfigError):
    """Raised when a field already has a rule with the same name."""

    def __init__(self, field: str, name: str):
        self.field = field
        self.name = name
        super().__init__(f"There is already a validation rule for {field} with the name {name}")


class MissingRuleNameError(RuleConfigError):
    """Raised when a rule in a list registration has no name."""
    pass


class InvalidRuleError(RuleConfigError):
    """Raised when a rule or its options have an unsupported shape."""
    pass


class UnknownRuleError(RuleConfigError):
    """Raised when a rule refers to a primitive or method that does not exist."""
    pass


class ResourceUnavailableError(RuleConfigError):
    """Raised when an I/O backed check cannot complete."""
    pass


class DnsLookupError(ResourceUnavailableError):
    """Raised when a DNS query fails for reasons other than a missing record."""
    pass


class FileInspectionError(ResourceUnavailableError):
    """Raised when a file cannot be read for type detection."""
    pass
