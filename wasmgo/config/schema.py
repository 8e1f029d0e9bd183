"""
Settings Schema.

Declares typed settings fields and validates values read from TOML.
"""

from dataclasses import dataclass
from typing import Any


class SchemaError(Exception):
    """Raised when a field definition is inconsistent."""

    pass


class ValidationError(SchemaError):
    """Raised when a settings value does not fit its field."""

    pass


@dataclass(frozen=True)
class ConfigField:
    """
    A single setting with its type and constraints.

    Attributes:
        type_: Expected type of the value
        default: Value used when the setting is absent
        description: Human-readable description, written as a TOML comment
        choices: Allowed values (optional)
    """

    type_: type
    default: Any
    description: str = ""
    choices: tuple[Any, ...] | None = None

    def __post_init__(self):
        if not isinstance(self.default, self.type_):
            raise SchemaError(
                f"Default value {self.default!r} does not match type {self.type_.__name__}"
            )
        if self.choices is not None and self.default not in self.choices:
            raise SchemaError(
                f"Default value {self.default!r} not in choices {list(self.choices)}"
            )

    def validate(self, value: Any) -> None:
        """
        Validate a value against this field.

        Raises:
            ValidationError: If the type or choice does not match
        """
        # bool is an int subclass; keep them apart
        if not isinstance(value, self.type_) or (
            self.type_ is not bool and isinstance(value, bool)
        ):
            raise ValidationError(
                f"Expected type {self.type_.__name__}, got {type(value).__name__}"
            )

        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Value {value!r} not in allowed choices {list(self.choices)}"
            )


def validate_config(config: dict[str, Any], schema: dict[str, ConfigField]) -> None:
    """
    Validate a partial settings dictionary against a schema.

    Absent fields are allowed (their defaults apply); unknown ones are not.

    Raises:
        ValidationError: If validation fails
    """
    for key in config:
        if key not in schema:
            raise ValidationError(f"Unknown setting: {key}")

    for field_name, value in config.items():
        try:
            schema[field_name].validate(value)
        except ValidationError as e:
            raise ValidationError(f"Setting '{field_name}': {e}") from e


def apply_defaults(config: dict[str, Any], schema: dict[str, ConfigField]) -> dict[str, Any]:
    """Return a complete settings dictionary, filling gaps from the schema."""
    return {name: config.get(name, field.default) for name, field in schema.items()}
