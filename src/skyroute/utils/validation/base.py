"""
Base Validation Components for SkyRoute

This module provides the foundational validation components used by the data
models and the loader. It includes the ValidationResult container for reporting
validation outcomes and the DataclassRule used to type-check dataclass fields at
construction time.
"""

from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


class DataclassRule:
    """
    Rule for validating dataclass fields.

    This rule ensures that fields in a dataclass instance match their type hints.
    Integers are accepted for fields declared as float, since JSON numbers and
    literals such as ``cost=100`` arrive as ints.

    Attributes:
        dataclass_type: The dataclass type to validate against
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        """
        Initialize a dataclass validation rule.

        Args:
            dataclass_type: The dataclass type to validate against
            error_message: Message to display when validation fails
        """
        self.error_message = error_message or f"Invalid value for {dataclass_type.__name__}"
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Type) -> bool:
        """Validate a value against its expected type."""
        origin = get_origin(expected_type)

        if expected_type is Any:
            return True

        # Handle Optional types
        if origin is Union:
            args = get_args(expected_type)
            if type(None) in args and value is None:
                return True
            expected_type = next(t for t in args if t is not type(None))
            origin = get_origin(expected_type)

        if value is None:
            return False

        # bool is an int subclass but never a valid number here
        if expected_type in (int, float) and isinstance(value, bool):
            return False

        if expected_type is float:
            return isinstance(value, (int, float))

        if origin is tuple:
            if not isinstance(value, tuple):
                return False
            args = get_args(expected_type)
            if len(args) == 2 and args[1] is Ellipsis:
                return all(self._validate_type(item, args[0]) for item in value)
            if args and len(args) != len(value):
                return False
            return all(self._validate_type(val, typ) for val, typ in zip(value, args))

        if origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True

        try:
            return isinstance(value, expected_type)
        except TypeError:
            return True

    def validate(self, value: Any) -> bool:
        """
        Validate a dataclass instance.

        Args:
            value: Dataclass instance to validate

        Returns:
            bool: True if validation passes, False otherwise
        """
        if not isinstance(value, self.dataclass_type):
            return False

        for field_name, field_type in self.type_hints.items():
            if not self._validate_type(getattr(value, field_name), field_type):
                return False

        return True


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    Args:
        cls: The dataclass to validate

    Returns:
        The decorated class with type validation

    Example:
        >>> @validate_dataclass
        ... @dataclass(frozen=True)
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        """Validate field types, then run the class's own checks."""
        validator = DataclassRule(cls)
        if not validator.validate(self):
            raise TypeError(f"Invalid field types in {cls.__name__}")

        if original_post_init:
            original_post_init(self)

    cls.__post_init__ = validated_post_init
    return cls
