"""Exceptions raised while generating Go code."""

from typing import Any


class GenerationError(Exception):
    """Base class for fatal generation errors.

    A generation run either produces a complete output or raises one of these.
    """


class UnsupportedTypeError(GenerationError):
    """Raised when a type expression is not Named, NonNull or List."""

    def __init__(self, node: Any, field_name: str):
        self.node = node
        self.field_name = field_name
        super().__init__(
            f'field type "{node}" of field "{field_name}" not supported!'
        )


class UnknownTypeError(GenerationError):
    """Raised when a field references a type missing from the catalog."""

    def __init__(self, type_name: str, field_name: str):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(
            f'unknown type "{type_name}" referenced by field "{field_name}"'
        )


class UnknownFieldError(GenerationError):
    """Raised when an operation selects a field its parent type does not define."""

    def __init__(self, parent_type: str, field_name: str):
        self.parent_type = parent_type
        self.field_name = field_name
        super().__init__(
            f'type "{parent_type}" has no field "{field_name}"'
        )


class SchemaLoadError(Exception):
    """Raised when a schema or document source cannot be loaded."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)
