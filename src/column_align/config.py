"""
Configuration - Handles alignment configuration.

This module handles:
- Configuration dataclass with all options
- JSON configuration file support
- Command-line overrides
- Configuration validation
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from column_align.core.padding import Justification, PaddingOptions
from column_align.core.tokenizer import TextQualifier
from column_align.exceptions import (
    ConfigError,
    InvalidColumnError,
    InvalidSeparatorError,
)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """
    Configuration for an alignment run.

    Attributes:
        input_file: File to align (None reads stdin)
        output_file: File to write (None writes stdout)
        separator: Input field separator
        output_separator: Output field separator (None uses separator)
        qualifier: Text qualifier (None disables qualified fields)
        justification: Default justification
        column_justification: Justification per 1-based column number
        pad: Surrounding pad width around separators
        columns: 1-based column numbers to output (empty outputs all)
        encoding: File encoding for input and output files
        log_level: Logging level
        verbose: Enable verbose output
        quiet: Suppress normal output
    """

    input_file: Optional[Path] = None
    output_file: Optional[Path] = None
    separator: str = ","
    output_separator: Optional[str] = None
    qualifier: Optional[str] = None

    # Padding options
    justification: Justification = Justification.LEFT
    column_justification: dict[int, Justification] = field(default_factory=dict)
    pad: int = 1

    columns: list[int] = field(default_factory=list)
    encoding: str = "utf-8"

    # Output options
    log_level: str = "WARNING"
    verbose: bool = False
    quiet: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Path):
                data[key] = str(value)
            elif isinstance(value, Justification):
                data[key] = value.value
            elif key == "column_justification":
                # JSON object keys are strings
                data[key] = {str(k): v.value for k, v in value.items()}
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file."""
        data = json.loads(path.read_text())
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create config from dictionary.

        Raises:
            ConfigError: If a value cannot be converted
        """
        data = dict(data)

        for key in ("input_file", "output_file"):
            if data.get(key):
                data[key] = Path(data[key])

        if isinstance(data.get("justification"), str):
            data["justification"] = Justification.parse(data["justification"])

        if "column_justification" in data:
            overrides = {}
            for column, value in (data["column_justification"] or {}).items():
                try:
                    column = int(column)
                except ValueError:
                    raise ConfigError(
                        f"invalid column number '{column}'", "column_justification"
                    ) from None
                if isinstance(value, str):
                    value = Justification.parse(value)
                overrides[column] = value
            data["column_justification"] = overrides

        if "columns" in data:
            columns = []
            for column in data["columns"] or []:
                try:
                    columns.append(int(column))
                except (TypeError, ValueError):
                    raise ConfigError(
                        f"invalid column number '{column}'", "columns"
                    ) from None
            data["columns"] = columns

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        return [str(error) for error in self._errors()]

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0

    def check(self) -> None:
        """
        Raise the first configuration problem, if any.

        Raises:
            ConfigError: If the configuration is invalid
        """
        errors = self._errors()
        if errors:
            raise errors[0]

    def _errors(self) -> list[ConfigError]:
        errors: list[ConfigError] = []

        if not self.separator:
            errors.append(InvalidSeparatorError())

        if self.input_file and not self.input_file.is_file():
            errors.append(
                ConfigError(f"input file does not exist: {self.input_file}", "input_file")
            )

        for column in self.columns:
            if column < 1:
                errors.append(InvalidColumnError(column, "columns"))

        for column in self.column_justification:
            if column < 1:
                errors.append(InvalidColumnError(column, "column_justification"))

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(ConfigError(f"invalid log level: {self.log_level}", "log_level"))

        return errors

    def text_qualifier(self) -> TextQualifier:
        """Build the TextQualifier for this configuration."""
        if self.qualifier:
            return TextQualifier(enabled=True, qualifier=self.qualifier)
        return TextQualifier()

    def padding_options(self) -> PaddingOptions:
        """Build the PaddingOptions for this configuration."""
        return PaddingOptions(
            justification=self.justification,
            column_override=dict(self.column_justification),
            pad=self.pad,
        )


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()


def merge_configs(base: Config, override: Config) -> Config:
    """
    Merge two configurations, with override taking precedence.

    Args:
        base: Base configuration
        override: Override configuration

    Returns:
        Merged configuration
    """
    base_dict = base.to_dict()
    override_dict = override.to_dict()

    # Only override non-default values from override
    merged = {}
    default = create_default_config().to_dict()

    for key in base_dict:
        if override_dict.get(key) != default.get(key):
            merged[key] = override_dict[key]
        else:
            merged[key] = base_dict[key]

    return Config.from_dict(merged)
