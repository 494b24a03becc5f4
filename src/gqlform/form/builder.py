import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from graphql import DocumentNode, NonNullTypeNode, VariableDefinitionNode

from gqlform import log
from gqlform.document.classifier import classify_mutation_operation
from gqlform.document.type_table import build_type_table
from gqlform.form.models import FieldRenderer, FormField
from gqlform.form.visitor import FieldVisitor, ResolverOverrides

REQUIRED_FIELD_ERROR = "Required field."


def is_unset(value: Any) -> bool:
    """Whether a form value counts as empty: None, "", zero, False or NaN."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, int | float):
        return value == 0 or math.isnan(value)
    return False


def validate_required(values: Mapping[str, Any], required_field_names: list[str]) -> dict[str, str]:
    """
    Check that every required field has a value.

    Args:
        values: Current form values keyed by field name
        required_field_names: Names of the fields that must be set

    Returns:
        Error message keyed by field name, empty when the values are valid
    """
    errors: dict[str, str] = {}
    for field_name in required_field_names:
        if is_unset(values.get(field_name)):
            errors[field_name] = REQUIRED_FIELD_ERROR
    return errors


def get_required_field_names(variables: tuple[VariableDefinitionNode, ...]) -> list[str]:
    """Names of the variables whose type is non-null at the top level."""
    return [variable.variable.name.value for variable in variables if isinstance(variable.type, NonNullTypeNode)]


@dataclass
class FormSpec:
    """
    Everything a form state manager needs to drive a mutation form.

    ``name`` is the form identity, ``initial_values`` are passed through
    untouched to seed the field state.
    """

    name: str
    fields: list[FormField]
    required_field_names: list[str]
    initial_values: dict[str, Any] | None = None

    def validate(self, values: Mapping[str, Any]) -> dict[str, str]:
        return validate_required(values, self.required_field_names)

    def render(self, renderer: FieldRenderer) -> list[Any]:
        return [form_field.render(renderer) for form_field in self.fields]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "fields": [form_field.model_dump() for form_field in self.fields],
            "required": self.required_field_names,
            "initialValues": self.initial_values,
        }


def build_form_spec(
    document: DocumentNode,
    initial_values: dict[str, Any] | None = None,
    resolvers: ResolverOverrides | None = None,
    defs: DocumentNode | None = None,
) -> FormSpec:
    """
    Build the form description of the mutation held by a document.

    Args:
        document: Parsed document holding exactly one mutation
        initial_values: Values to seed the form with, passed through unmodified
        resolvers: Per type name overrides of the derived widget
        defs: Document with the enum and input object definitions the variables use

    Returns:
        FormSpec: One field per mutation variable, in declaration order

    Raises:
        FormBuildError: If the document shape is unsupported or a type cannot be resolved
    """
    operation = classify_mutation_operation(document)
    types = build_type_table(defs)
    visitor = FieldVisitor(types, resolvers)

    fields = [visitor.visit_variable(variable) for variable in operation.variables]
    required_field_names = get_required_field_names(operation.variables)

    log.info(f"Built form '{operation.name}' with {len(fields)} fields ({len(required_field_names)} required)")

    return FormSpec(
        name=operation.name,
        fields=fields,
        required_field_names=required_field_names,
        initial_values=initial_values,
    )
