"""Application type classification from the applicant's answers.

Pure and total: missing themes or questions fall through to
``ApplicationType.UNKNOWN`` instead of raising.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from application_summary.models import ApplicationRecord

log = logging.getLogger(__name__)

ABOUT_APPLICATION_THEME = "about-application"
CRIME_THEME = "crime"
FATAL_CLAIM_QUESTION = "q-applicant-fatal-claim"
CLAIM_TYPE_QUESTION = "q-applicant-claim-type"
CRIME_DURATION_QUESTION = "q-applicant-did-the-crime-happen-once-or-over-time"

OVER_A_PERIOD_OF_TIME = "over-a-period-of-time"
ONCE = "once"


class ApplicationType(str, Enum):
    """Application category shown at the top of the summary."""

    FUNERAL = "Funeral"
    FATAL = "Fatal"
    PERIOD_OF_ABUSE = "Period of abuse"
    PERSONAL_INJURY = "Personal injury"
    UNKNOWN = "Unknown"


def _answer(record: ApplicationRecord, theme_id: str, question_id: str) -> Any:
    question = record.find_question(theme_id, question_id)
    return getattr(question, "value", None)


def classify(record: ApplicationRecord) -> ApplicationType:
    """Return the application category; first matching rule wins."""
    if _answer(record, ABOUT_APPLICATION_THEME, FATAL_CLAIM_QUESTION):
        if _answer(record, ABOUT_APPLICATION_THEME, CLAIM_TYPE_QUESTION) or record.meta.split_funeral:
            return ApplicationType.FUNERAL
        return ApplicationType.FATAL

    duration = _answer(record, CRIME_THEME, CRIME_DURATION_QUESTION)
    if duration == OVER_A_PERIOD_OF_TIME:
        return ApplicationType.PERIOD_OF_ABUSE
    if duration == ONCE:
        return ApplicationType.PERSONAL_INJURY

    log.debug("No classification rule matched, defaulting to Unknown")
    return ApplicationType.UNKNOWN
