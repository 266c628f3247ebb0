"""Schema sub-package: parameter models and builder configuration."""
from bindql.schema.config import BuilderConfig
from bindql.schema.params import (
    PLACEHOLDER_PATTERN,
    Binding,
    BindingOverride,
    ParamType,
    find_placeholders,
    infer_type,
    resolve_values,
    to_param_type,
)

__all__ = [
    "BuilderConfig",
    "PLACEHOLDER_PATTERN",
    "Binding",
    "BindingOverride",
    "ParamType",
    "find_placeholders",
    "infer_type",
    "resolve_values",
    "to_param_type",
]
