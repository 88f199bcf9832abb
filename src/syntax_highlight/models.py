from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from syntax_highlight.errors import InvalidRequest

AnnotationStyle = Literal["info", "warning", "error"]


class Annotation(BaseModel):
    line: int
    message: str
    style: AnnotationStyle | None = None


class HighlightRequest(BaseModel):
    """Body of ``POST /highlight``. JSON keys are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: StrictStr = Field(min_length=1)
    lang: StrictStr = Field(min_length=1)
    theme: str | None = None
    highlight_lines: set[int] = Field(default_factory=set)
    focus_lines: set[int] = Field(default_factory=set)
    show_line_numbers: bool = False
    annotations: list[Annotation] = Field(default_factory=list)
    words_to_highlight: set[str] = Field(default_factory=set)

    @field_validator("words_to_highlight")
    @classmethod
    def _fold_words(cls, words: set[str]) -> set[str]:
        return {w.strip().casefold() for w in words if w.strip()}

    @classmethod
    def parse(cls, payload: Any) -> "HighlightRequest":
        """Validate a raw payload, raising ``InvalidRequest`` on failure."""
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidRequest(format_validation_errors(exc.errors())) from exc


def format_validation_errors(errors: list[Any]) -> str:
    parts = []
    for error in errors:
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "; ".join(parts)
