from collections.abc import Mapping
from typing import Any

from graphql import (
    EnumTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    TypeNode,
    VariableDefinitionNode,
)

from gqlform import log
from gqlform.document.type_table import TypeDefinitionTable
from gqlform.errors import UnknownTypeError, UnresolvableTypeError, UnsupportedListTypeError
from gqlform.form.models import FieldOption, FieldResolver, FormField
from gqlform.tools.string import humanize

SCALAR_TYPE_TO_FIELD: dict[str, dict[str, str]] = {
    "String": {"widget": "input", "type": "text"},
    "Int": {"widget": "input", "type": "number"},
    "Float": {"widget": "input", "type": "number"},
    "Boolean": {"widget": "input", "type": "checkbox"},
    "ID": {"widget": "input", "type": "hidden"},
}

SELECT_WIDGET = "select"

ResolverOverrides = Mapping[str, FieldResolver | Mapping[str, Any]]


def normalize_resolvers(resolvers: ResolverOverrides | None) -> dict[str, FieldResolver]:
    """Validate caller supplied resolver overrides into FieldResolver models."""
    if not resolvers:
        return {}
    return {
        type_name: resolver if isinstance(resolver, FieldResolver) else FieldResolver.model_validate(resolver)
        for type_name, resolver in resolvers.items()
    }


def get_named_type_name(type_node: TypeNode) -> str:
    """Return the name of the named type at the bottom of a type expression."""
    while not isinstance(type_node, NamedTypeNode):
        type_node = type_node.type  # type: ignore[attr-defined]
    return type_node.name.value


class FieldVisitor:
    """
    Resolves variable definitions of an operation into form fields.

    A named type is resolved by, in order: the built-in scalar table, the
    type table (unknown names fail), a caller resolver for the type, and
    enum expansion into a select widget. A non-null wrapper marks the
    resolved field as required.
    """

    def __init__(
        self,
        types: TypeDefinitionTable,
        resolvers: ResolverOverrides | None = None,
        scalars: Mapping[str, Mapping[str, Any]] = SCALAR_TYPE_TO_FIELD,
    ):
        self.types = types
        self.resolvers = normalize_resolvers(resolvers)
        self.scalars = scalars

    def visit_variable(self, node: VariableDefinitionNode) -> FormField:
        """
        Build the form field for a single variable definition.

        Args:
            node: The variable definition of the operation

        Returns:
            FormField: Named after the variable, labelled with its humanized name
        """
        name = node.variable.name.value
        fragment = self.resolve_type(node.type)

        widget = fragment.pop("widget")
        required = bool(fragment.pop("required", False))
        options = fragment.pop("options", [])
        value_format = fragment.pop("format", None)

        log.debug(f"Resolved variable '{name}' to widget '{widget}' (required={required})")

        return FormField(
            name=name,
            label=humanize(name),
            widget=widget,
            required=required,
            options=options,
            extra_props=fragment,
            format=value_format,
        )

    def resolve_type(self, type_node: TypeNode) -> dict[str, Any]:
        """
        Resolve a type expression to a field descriptor fragment.

        Args:
            type_node: A NonNull or Named type node

        Returns:
            Dict with at least a "widget" key

        Raises:
            UnsupportedListTypeError: If the type expression holds a list
            UnknownTypeError: If a named type is not a scalar nor in the type table
            UnresolvableTypeError: If a known type has no resolver and is not an enum
        """
        # Handle NonNull wrapper. e.g. `Type!`
        if isinstance(type_node, NonNullTypeNode):
            return {"required": True, **self.resolve_type(type_node.type)}

        if isinstance(type_node, ListTypeNode):
            raise UnsupportedListTypeError(get_named_type_name(type_node))

        if isinstance(type_node, NamedTypeNode):
            return self.resolve_named_type(type_node.name.value)

        raise TypeError(f"Unsupported type node: {type(type_node).__name__}")

    def resolve_named_type(self, type_name: str) -> dict[str, Any]:
        scalar = self.scalars.get(type_name)
        if scalar:
            return dict(scalar)

        type_def = self.types.get(type_name)
        if type_def is None:
            raise UnknownTypeError(type_name)

        resolver = self.resolvers.get(type_name)
        if resolver:
            return resolver.to_fragment()

        if isinstance(type_def, EnumTypeDefinitionNode):
            return {"widget": SELECT_WIDGET, "options": self.enum_options(type_def)}

        raise UnresolvableTypeError(type_name)

    def enum_options(self, enum_def: EnumTypeDefinitionNode) -> list[FieldOption]:
        return [FieldOption(value=value.name.value, label=value.name.value) for value in enum_def.values or ()]
