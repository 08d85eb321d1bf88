"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

if TYPE_CHECKING:
    from application_summary.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_logo(settings)
    _check_timezone(settings)


def _check_logo(settings: AppSettings) -> None:
    logo = settings.pdf.logo_path
    if logo is None:
        log.debug("No logo configured, header will be text only")
        return
    if not logo.is_file():
        raise ValueError(
            f"SUMMARY_PDF_LOGO_PATH points at '{logo}', which is not a file."
        )


def _check_timezone(settings: AppSettings) -> None:
    try:
        ZoneInfo(settings.pdf.display_timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(
            f"SUMMARY_PDF_DISPLAY_TIMEZONE '{settings.pdf.display_timezone}' is not a known time zone."
        ) from exc
