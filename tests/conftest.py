from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from faker import Faker
from graphql import DocumentNode, parse
from hypothesis import strategies as st
from hypothesis.strategies import composite

SCALAR_TYPES = ["String", "Int", "Float", "Boolean", "ID"]


class TestFormData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    CREATE_USER: Path = TESTS_DATA_DIR / "create_user.graphql"
    DEFS: Path = TESTS_DATA_DIR / "defs.graphql"
    RESOLVERS: Path = TESTS_DATA_DIR / "resolvers.yaml"
    GET_USER: Path = TESTS_DATA_DIR / "get_user.graphql"
    USER_DATA: Path = TESTS_DATA_DIR / "user_data.json"
    TWO_MUTATIONS: Path = TESTS_DATA_DIR / "two_mutations.graphql"
    VALID_VALUES: Path = TESTS_DATA_DIR / "valid_values.json"
    INVALID_VALUES: Path = TESTS_DATA_DIR / "invalid_values.json"


@pytest.fixture
def defs() -> DocumentNode:
    return parse(TestFormData.DEFS.read_text())


@pytest.fixture
def create_user() -> DocumentNode:
    return parse(TestFormData.CREATE_USER.read_text())


@pytest.fixture
def resolvers() -> dict[str, dict[str, Any]]:
    return {
        "Date": {"widget": "input", "type": "date"},
        "Role": {"widget": "radio"},
    }


def graphql_name(faker: Faker) -> str:
    """A unique random word usable as a GraphQL name."""
    word = faker.unique.word()
    while not (word.isascii() and word.isalpha()):
        word = faker.unique.word()
    return word


@dataclass
class MockVariable:
    name: str
    type_name: str
    non_null: bool = False
    enum_values: list[str] = field(default_factory=list)

    @property
    def is_enum(self) -> bool:
        return bool(self.enum_values)

    @property
    def type_str(self) -> str:
        return f"{self.type_name}!" if self.non_null else self.type_name

    def to_variable_str(self) -> str:
        return f"${self.name}: {self.type_str}"

    def to_enum_str(self) -> str:
        return f"enum {self.type_name} {{ {' '.join(self.enum_values)} }}"

    @classmethod
    def scalar_variable(cls, faker: Faker, non_null: bool) -> "MockVariable":
        """Random scalar variable e.g. `$title: String!`"""
        return cls(graphql_name(faker).lower(), faker.random_element(SCALAR_TYPES), non_null)

    @classmethod
    def enum_variable(cls, faker: Faker, non_null: bool) -> "MockVariable":
        """Random enum variable e.g. `$color: Color_Enum`"""
        name = graphql_name(faker).lower()
        num_values = faker.random_int(min=1, max=5)
        values = [graphql_name(faker).upper() for _ in range(num_values)]
        return cls(name, f"{name.capitalize()}_Enum", non_null, values)


@composite
def mock_mutation_strategy(
    draw: Callable[[st.SearchStrategy[Any]], Any],
) -> tuple[DocumentNode, DocumentNode, list[MockVariable]]:
    """Generate a mutation document with random variables, plus the document defining its enums."""
    faker = Faker()

    num_variables = draw(st.integers(min_value=0, max_value=6))
    variables = []
    for _ in range(num_variables):
        non_null = draw(st.booleans())
        if draw(st.booleans()):
            variables.append(MockVariable.enum_variable(faker, non_null))
        else:
            variables.append(MockVariable.scalar_variable(faker, non_null))

    variables_str = f"({', '.join(v.to_variable_str() for v in variables)})" if variables else ""
    document = parse(f"mutation generated{variables_str} {{ generated }}")
    defs = parse("\n".join(v.to_enum_str() for v in variables if v.is_enum) or "scalar Unused")

    return document, defs, variables
