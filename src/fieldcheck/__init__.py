"""fieldcheck - Declarative field validation for records.

Register rules per field, then validate a mapping of field name to value to
get back the messages of every rule that failed.
"""

__version__ = "0.1.0"
__author__ = "fieldcheck contributors"
__description__ = "Declarative field validation for records"

from fieldcheck.errors import (
    DnsLookupError,
    DuplicateRuleError,
    FileInspectionError,
    InvalidRuleError,
    MissingRuleNameError,
    ResourceUnavailableError,
    RuleConfigError,
    UnknownRuleError,
)
from fieldcheck.validation import Phase, RuleRegistry, Validator
from fieldcheck.values import FileUpload, UploadError

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "Validator",
    "RuleRegistry",
    "Phase",
    "FileUpload",
    "UploadError",
    "RuleConfigError",
    "DuplicateRuleError",
    "MissingRuleNameError",
    "InvalidRuleError",
    "UnknownRuleError",
    "ResourceUnavailableError",
    "DnsLookupError",
    "FileInspectionError",
]
