"""Form description built from the variables of a GraphQL mutation."""

from .builder import REQUIRED_FIELD_ERROR, FormSpec, build_form_spec, validate_required
from .initial_values import extract_initial_values
from .models import FieldOption, FieldRenderer, FieldResolver, FormField
from .visitor import SCALAR_TYPE_TO_FIELD, FieldVisitor

__all__ = [
    "REQUIRED_FIELD_ERROR",
    "SCALAR_TYPE_TO_FIELD",
    "FieldOption",
    "FieldRenderer",
    "FieldResolver",
    "FieldVisitor",
    "FormField",
    "FormSpec",
    "build_form_spec",
    "extract_initial_values",
    "validate_required",
]
