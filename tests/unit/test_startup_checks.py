"""Tests for startup validation."""

from __future__ import annotations

import pytest

from application_summary.core.config import AppSettings, SummaryPDFConfig
from application_summary.core.startup_checks import validate_settings


class TestValidateSettings:
    def test_defaults_pass(self) -> None:
        validate_settings(AppSettings(pdf=SummaryPDFConfig()))

    def test_existing_logo_passes(self, logo_png) -> None:
        validate_settings(AppSettings(pdf=SummaryPDFConfig(logo_path=logo_png)))

    def test_missing_logo(self, tmp_path) -> None:
        settings = AppSettings(pdf=SummaryPDFConfig(logo_path=tmp_path / "nope.png"))
        with pytest.raises(ValueError, match="SUMMARY_PDF_LOGO_PATH"):
            validate_settings(settings)

    def test_logo_directory_rejected(self, tmp_path) -> None:
        settings = AppSettings(pdf=SummaryPDFConfig(logo_path=tmp_path))
        with pytest.raises(ValueError):
            validate_settings(settings)

    def test_unknown_timezone(self) -> None:
        settings = AppSettings(pdf=SummaryPDFConfig(display_timezone="Mars/Olympus_Mons"))
        with pytest.raises(ValueError, match="SUMMARY_PDF_DISPLAY_TIMEZONE"):
            validate_settings(settings)
