"""Core modules for GraphQL to Go code generation."""

from .auth import Auth, BearerAuth, HeaderAuth, NoAuth
from .catalog import CatalogEntry, TypeCatalog, TypeCategory
from .config import GolangConfig
from .emitter import StructEmitter
from .errors import (
    GenerationError,
    SchemaLoadError,
    UnknownFieldError,
    UnknownTypeError,
    UnsupportedTypeError,
)
from .generator import GolangGenerator
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .loader import load_documents, load_schema
from .naming import format_name
from .resolver import FieldDecl, resolve_field_type
from .synthesizer import OperationOutput, OperationSynthesizer
from .templates import TemplateRenderer

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    "HeaderAuth",
    "NoAuth",
    # Catalog
    "CatalogEntry",
    "TypeCatalog",
    "TypeCategory",
    # Config
    "GolangConfig",
    # Errors
    "GenerationError",
    "SchemaLoadError",
    "UnknownFieldError",
    "UnknownTypeError",
    "UnsupportedTypeError",
    # Generation
    "FieldDecl",
    "GolangGenerator",
    "OperationOutput",
    "OperationSynthesizer",
    "StructEmitter",
    "TemplateRenderer",
    "format_name",
    "resolve_field_type",
    # Hooks
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
    "PostGenerateHook",
    "PreGenerateHook",
    # Loading
    "load_documents",
    "load_schema",
]
