"""Rule file configuration for fieldcheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fieldcheck.validation import Phase, Validator

CONFIG_FILE_NAME = ".fieldcheck.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class OutputFormat(str, Enum):
    """Output format types."""
    TABLE = "table"
    JSON = "json"


class RuleEntry(BaseModel):
    """One rule of a field as written in a rule file."""
    name: str
    rule: str | list[Any] | None = None
    message: str | None = None
    on: Phase | None = None
    present: bool = False
    allow_empty: bool = Field(alias="allowEmpty", default=False)
    stop_on_fail: bool = Field(alias="stopOnFail", default=False)

    @field_validator("rule")
    @classmethod
    def validate_rule(cls, v):
        if isinstance(v, list) and (not v or not isinstance(v[0], str)):
            raise ValueError("rule list must start with a rule name")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_options(self) -> dict[str, Any]:
        """Options for :meth:`RuleRegistry.add`."""
        options: dict[str, Any] = {
            "on": self.on,
            "present": self.present,
            "allow_empty": self.allow_empty,
            "stop_on_fail": self.stop_on_fail,
        }
        if self.rule is not None:
            options["rule"] = tuple(self.rule) if isinstance(self.rule, list) else self.rule
        if self.message is not None:
            options["message"] = self.message
        return options


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class FieldcheckConfig(BaseModel):
    """Complete fieldcheck configuration model."""
    rules: dict[str, list[RuleEntry | str]] = Field(default_factory=dict)
    phase: Phase = Phase.CREATE
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def entries(self, field: str) -> list[RuleEntry]:
        """Rules of a field with bare rule names expanded."""
        return [
            RuleEntry(name=entry) if isinstance(entry, str) else entry
            for entry in self.rules.get(field, [])
        ]


def load_config(config_path: str | Path | None = None) -> FieldcheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .fieldcheck.json

    Returns:
        FieldcheckConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file specified but not found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return create_default_config()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    try:
        return FieldcheckConfig.model_validate(config_data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest .fieldcheck.json in ``start_dir`` or one of its parents.

    Directories named like the rule file are skipped.
    """
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def create_default_config() -> FieldcheckConfig:
    """Create an empty configuration: no rules, create phase."""
    return FieldcheckConfig()


def build_validator(config: FieldcheckConfig) -> Validator:
    """Create a validator holding every rule of the configuration, in file order.

    Raises:
        RuleConfigError: If the rules conflict, e.g. a duplicate name on a field
    """
    validator = Validator()
    for field in config.rules:
        for entry in config.entries(field):
            validator.add(field, entry.name, **entry.to_options())
    return validator
