"""Errors raised while building a form from a GraphQL document.

All of them are configuration errors: the document has an unsupported shape
or a type has no way to be rendered. They are raised at build time, before
any form is shown, and the build never returns a partial result.
"""


class FormBuildError(ValueError):
    """Base class for every failure of the form build."""


class AmbiguousFragmentUsageError(FormBuildError):
    """Raised when a document holds fragments but no operation."""

    def __init__(self) -> None:
        super().__init__(
            "Passing only a fragment is not supported. "
            "You must include a query, subscription or mutation as well"
        )


class MultipleOperationsError(FormBuildError):
    """Raised when a document holds more than one query, mutation or subscription."""

    def __init__(self, queries: int, mutations: int, subscriptions: int) -> None:
        self.queries = queries
        self.mutations = mutations
        self.subscriptions = subscriptions
        super().__init__(
            "Only one operation per form is supported. "
            f"Document had {queries} queries, {subscriptions} subscriptions and {mutations} mutations"
        )


class NoMutationFoundError(FormBuildError):
    """Raised when a document does not hold exactly one mutation."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected exactly one mutation definition, document had {count}")


class NotExactlyOneQueryError(FormBuildError):
    """Raised when a document does not hold exactly one query."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected exactly one query, document had {count}")


class TypeResolutionError(FormBuildError):
    """Base class for failures resolving a variable type to a widget."""

    def __init__(self, type_name: str, message: str) -> None:
        self.type_name = type_name
        super().__init__(message)


class UnknownTypeError(TypeResolutionError):
    """Raised when a named type is neither a built-in scalar nor a known definition."""

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name, f"User defined field {type_name} does not correspond to any known GraphQL types")


class UnresolvableTypeError(TypeResolutionError):
    """Raised when a known type has no resolver and is not an enum."""

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name, f"Not able to find a definition for type {type_name}")


class UnsupportedListTypeError(TypeResolutionError):
    """Raised when a variable is typed as a list."""

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name, f"List types are not supported as form fields: [{type_name}]")
