"""Nested pydantic-settings configuration for the application.

Each group reads its own ``SUMMARY_<GROUP>_*`` env vars::

    export SUMMARY_PDF_PAGE_SIZE=a4
    export SUMMARY_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_HEADER_LINES: list[str] = [
    "Tel: 0300 003 3601",
    "CICA",
    "10 Clyde Place, Buchanan Wharf",
    "Glasgow G5 8AQ",
    "www.cica.gov.uk",
]

DEFAULT_INTRO_TEXT = (
    "This document provides a summary of the information supplied to CICA in your "
    "application form. Please contact us on 0300 003 3601 if you require any changes "
    "to be made."
)


class SummaryPDFConfig(BaseSettings):
    """Summary PDF layout configuration.

    Sizes are in points.  Env vars use ``SUMMARY_PDF_`` prefix::

        export SUMMARY_PDF_PAGE_SIZE=a4
        export SUMMARY_PDF_LOGO_PATH=./public/logo.png
    """

    model_config = {"env_prefix": "SUMMARY_PDF_"}

    page_size: Literal["letter", "a4"] = "letter"
    margin_inches: float = Field(default=1.0, gt=0.0, le=3.0)
    font_family: str = "Helvetica"
    body_font_size: float = Field(default=12.5, ge=6, le=72)
    banner_font_size: float = Field(default=14.5, ge=6, le=72)
    title_font_size: float = Field(default=25, ge=6, le=72)
    small_font_size: float = Field(default=10, ge=6, le=72)
    declaration_font_size: float = Field(default=12, ge=6, le=72)
    declaration_heading_font_size: float = Field(default=18, ge=6, le=72)
    line_spacing: float = Field(default=1.2, ge=1.0, le=3.0)

    banner_width: float = Field(default=480, gt=0)
    banner_padding: float = Field(default=10, ge=0)
    page_break_buffer: float = Field(default=25, ge=0)
    footer_offset: float = Field(default=25, gt=0)
    indent: float = Field(default=30, ge=0)
    bullet_indent: float = Field(default=20, ge=0)
    list_indent: float = Field(default=20, ge=0)

    protective_marking: str = "Protect-Personal"
    title: str = "CICA Summary Application Form"
    intro_text: str = DEFAULT_INTRO_TEXT
    header_lines: list[str] = Field(default_factory=lambda: list(DEFAULT_HEADER_LINES))
    logo_path: Optional[Path] = None

    display_timezone: str = "Europe/London"
    invariant: bool = True


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``SUMMARY_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "SUMMARY_OBSERVABILITY_"}

    service_name: str = "application-summary"
    log_level: str = "INFO"
    log_format: Literal["auto", "console", "json"] = "auto"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    pdf: SummaryPDFConfig = SummaryPDFConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
