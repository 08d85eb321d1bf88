"""Question → layout items.

Dispatch order: per-id special cases, then the ``simple`` / ``composite``
discriminant.  Special cases are a lookup table so new hard-coded
questions plug in without touching the generic renderers::

    renderer.register("q-some-id", my_strategy)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional, Union

from application_summary.exceptions import QuestionRenderError
from application_summary.layout.formatting import display_value, format_date
from application_summary.layout.models import Gap, LayoutItem, Line
from application_summary.layout.styles import PHYSICAL_INJURIES_LABEL
from application_summary.models import CompositeQuestion, SimpleQuestion, SubQuestion

PHYSICAL_INJURIES_QUESTION = "q-applicant-physical-injuries"
NAME_MARKER = "name"

AnyQuestion = Union[SimpleQuestion, CompositeQuestion]
RenderStrategy = Callable[[AnyQuestion], list[LayoutItem]]


def _prefer_label(value_label: Any, value: Any) -> Any:
    return value_label if value_label else value


class QuestionRenderer:
    """Turns one question into label/answer lines plus a trailing gap."""

    def __init__(self, timezone: str, indent: float) -> None:
        self._timezone = timezone
        self._indent = indent
        self._special: dict[str, RenderStrategy] = {
            PHYSICAL_INJURIES_QUESTION: self._render_physical_injuries,
        }

    def register(self, question_id: str, strategy: RenderStrategy) -> None:
        self._special[question_id] = strategy

    def render(self, question: AnyQuestion) -> list[LayoutItem]:
        strategy = self._special.get(question.id)
        if strategy is not None:
            return strategy(question)
        if isinstance(question, SimpleQuestion):
            return self._render_simple(question)
        if isinstance(question, CompositeQuestion):
            return self._render_composite(question)
        raise QuestionRenderError(
            f"Unsupported question shape {type(question).__name__}",
            question_id=getattr(question, "id", ""),
        )

    # ── Strategies ───────────────────────────────────────────────────

    def _render_physical_injuries(self, question: AnyQuestion) -> list[LayoutItem]:
        answer = _prefer_label(getattr(question, "value_label", None), getattr(question, "value", None))
        return [
            Line(PHYSICAL_INJURIES_LABEL, "label"),
            Line(display_value(answer), "answer"),
            Gap("answer"),
        ]

    def _render_simple(self, question: SimpleQuestion) -> list[LayoutItem]:
        if question.is_date_time:
            answer = self._date(question.id, question.value_label, question.value)
        else:
            answer = display_value(_prefer_label(question.value_label, question.value))
        return [Line(question.label, "label"), Line(answer, "answer"), Gap("answer")]

    def _render_composite(self, question: CompositeQuestion) -> list[LayoutItem]:
        items: list[LayoutItem] = [Line(question.label, "label")]
        parts = question.parts()
        if NAME_MARKER in question.id:
            names = [display_value(part.value) for part in parts]
            items.append(Line(" ".join(name for name in names if name), "answer"))
        else:
            for part in parts:
                items.append(Line(self._sub_answer(question.id, part), "answer", indent=self._indent))
        items.append(Gap("answer"))
        return items

    # ── Helpers ──────────────────────────────────────────────────────

    def _sub_answer(self, question_id: str, part: SubQuestion) -> str:
        if part.is_date_time:
            return self._date(f"{question_id}/{part.id}", part.value_label, part.value)
        return display_value(_prefer_label(part.value_label, part.value))

    def _date(self, question_id: str, value_label: Any, value: Any) -> str:
        """Format the first of *value_label*, *value* that reads as a date."""
        candidates = [c for c in (value_label, value) if c not in (None, "")]
        error: Optional[ValueError] = None
        for candidate in candidates:
            try:
                return format_date(candidate, self._timezone)
            except ValueError as exc:
                error = exc
        shown = candidates[0] if candidates else None
        raise QuestionRenderError(
            f"Question {question_id} has an unreadable date {shown!r}",
            question_id=question_id,
        ) from error
