"""Pydantic models for the submitted application record.

Records arrive in the upstream form service's camelCase JSON shape::

    record = ApplicationRecord.from_dict(json.loads(raw))
    record.meta.case_reference      # "caseReference" on the wire

All models are frozen: the record is a read-only snapshot for the whole
rendering pass.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from application_summary.exceptions import RecordParseError

DATE_TIME_FORMAT = "date-time"


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


# ── Question models ──────────────────────────────────────────────────


class QuestionFormat(_RecordModel):
    """Display format hint, e.g. ``{"value": "date-time"}``."""

    value: str = ""


class IntegrationMeta(_RecordModel):
    hide_on_summary: bool = False


class QuestionMeta(_RecordModel):
    integration: IntegrationMeta = IntegrationMeta()


class SubQuestion(_RecordModel):
    """One part of a composite answer."""

    id: str = ""
    label: str = ""
    value: Any = None
    value_label: Any = None
    format: Optional[QuestionFormat] = None

    @property
    def is_date_time(self) -> bool:
        return self.format is not None and self.format.value == DATE_TIME_FORMAT


class _QuestionBase(_RecordModel):
    id: str
    label: str = ""
    format: Optional[QuestionFormat] = None
    meta: QuestionMeta = QuestionMeta()

    @property
    def is_date_time(self) -> bool:
        return self.format is not None and self.format.value == DATE_TIME_FORMAT

    @property
    def hidden(self) -> bool:
        """True when the question is flagged to be left off the summary."""
        return self.meta.integration.hide_on_summary


class SimpleQuestion(_QuestionBase):
    type: Literal["simple"] = "simple"
    value: Any = None
    value_label: Any = None


class CompositeQuestion(_QuestionBase):
    """Multi-part answer: a mapping of sub-questions, or an ordered list of parts."""

    type: Literal["composite"] = "composite"
    values: Union[dict[str, SubQuestion], list[SubQuestion]] = Field(default_factory=dict)

    def parts(self) -> list[SubQuestion]:
        if isinstance(self.values, dict):
            return list(self.values.values())
        return list(self.values)


Question = Annotated[Union[SimpleQuestion, CompositeQuestion], Field(discriminator="type")]


# ── Theme / record models ────────────────────────────────────────────


class Theme(_RecordModel):
    """A titled group of questions; ``values`` order is display order."""

    id: str
    title: str = ""
    values: dict[str, Question] = Field(default_factory=dict)

    @field_validator("values", mode="before")
    @classmethod
    def _index_question_list(cls, raw: Any) -> Any:
        if not isinstance(raw, list):
            return raw
        indexed: dict[str, Any] = {}
        for item in raw:
            question_id = item.get("id") if isinstance(item, dict) else getattr(item, "id", None)
            if not question_id:
                raise ValueError("questions supplied as a list must each carry an 'id'")
            indexed[question_id] = item
        return indexed


class Declaration(_RecordModel):
    """Declaration HTML (``label``) and the consent text the applicant agreed to."""

    label: str = ""
    value_label: str = ""


class RecordMeta(_RecordModel):
    case_reference: str = ""
    submitted_date: Optional[datetime] = None
    split_funeral: Optional[bool] = None


class ApplicationRecord(_RecordModel):
    """Root of a submitted application."""

    themes: list[Theme] = Field(default_factory=list)
    meta: RecordMeta = RecordMeta()
    declaration: Declaration = Declaration()

    @model_validator(mode="after")
    def _unique_theme_ids(self) -> ApplicationRecord:
        seen: set[str] = set()
        for theme in self.themes:
            if theme.id in seen:
                raise ValueError(f"duplicate theme id '{theme.id}'")
            seen.add(theme.id)
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplicationRecord:
        """Parse an upstream JSON payload. Raises ``RecordParseError`` on bad shape."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise RecordParseError(f"Invalid application record: {exc}") from exc

    def find_theme(self, theme_id: str) -> Optional[Theme]:
        return next((t for t in self.themes if t.id == theme_id), None)

    def find_question(
        self, theme_id: str, question_id: str
    ) -> Optional[Union[SimpleQuestion, CompositeQuestion]]:
        """Look up a question by theme and id; ``None`` if either is absent."""
        theme = self.find_theme(theme_id)
        if theme is None:
            return None
        return theme.values.get(question_id)
