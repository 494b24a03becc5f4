from collections.abc import Callable
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class FieldOption(BaseModel):
    """One choice of a select widget."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class FieldResolver(BaseModel):
    """A caller supplied override mapping a type name to a widget.

    Extra keys are kept and handed to the renderer as widget props,
    e.g. ``{"widget": "input", "type": "date"}``.
    """

    model_config = ConfigDict(extra="allow")

    widget: str
    format: Callable[[Any], Any] | None = None

    def to_fragment(self) -> dict[str, Any]:
        fragment: dict[str, Any] = {"widget": self.widget}
        if self.format is not None:
            fragment["format"] = self.format
        fragment.update(self.model_extra or {})
        return fragment


class FormField(BaseModel):
    """The renderer agnostic description of one form field."""

    name: str
    label: str
    widget: str
    required: bool = False
    options: list[FieldOption] = Field(default_factory=list)
    extra_props: dict[str, Any] = Field(default_factory=dict)
    format: Callable[[Any], Any] | None = Field(default=None, exclude=True)

    def props(self) -> dict[str, Any]:
        """Props for the rendered widget: the extra descriptor props plus the placeholder."""
        return {"placeholder": self.label, **self.extra_props}

    def render(self, renderer: "FieldRenderer") -> Any:
        return renderer(self)


class FieldRenderer(Protocol):
    """Renders a form field into whatever the UI layer displays."""

    def __call__(self, field: FormField) -> Any: ...
