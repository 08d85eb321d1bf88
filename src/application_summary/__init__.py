"""application-summary: printable PDF summaries of submitted application forms.

Usage::

    from application_summary import ApplicationRecord, build

    record = ApplicationRecord.from_dict(payload)
    result = await build(record, "summary.pdf")
    if not result.ok:
        raise result.error
"""

from __future__ import annotations

from application_summary.classifier import ApplicationType, classify
from application_summary.core.config import AppSettings, SummaryPDFConfig
from application_summary.declaration import Heading, ListItem, Paragraph, extract
from application_summary.exceptions import (
    LayoutError,
    MalformedDeclarationError,
    QuestionRenderError,
    RecordParseError,
    SinkWriteError,
    SummaryError,
)
from application_summary.models import (
    ApplicationRecord,
    CompositeQuestion,
    Declaration,
    RecordMeta,
    SimpleQuestion,
    SubQuestion,
    Theme,
)
from application_summary.services.summary_service import BuildResult, SummaryService, build

__all__ = [
    "AppSettings",
    "ApplicationRecord",
    "ApplicationType",
    "BuildResult",
    "CompositeQuestion",
    "Declaration",
    "Heading",
    "LayoutError",
    "ListItem",
    "MalformedDeclarationError",
    "Paragraph",
    "QuestionRenderError",
    "RecordMeta",
    "RecordParseError",
    "SimpleQuestion",
    "SinkWriteError",
    "SubQuestion",
    "SummaryError",
    "SummaryPDFConfig",
    "SummaryService",
    "Theme",
    "build",
    "classify",
    "extract",
]
