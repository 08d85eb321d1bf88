"""Shared fixtures for application-summary tests."""

from __future__ import annotations

from typing import Any

import pytest

from application_summary.core.config import SummaryPDFConfig
from application_summary.models import ApplicationRecord
from tests.fakes.records import record_payload


@pytest.fixture
def record_dict() -> dict[str, Any]:
    """Upstream-shaped payload (camelCase, question lists)."""
    return record_payload()


@pytest.fixture
def record(record_dict: dict[str, Any]) -> ApplicationRecord:
    return ApplicationRecord.from_dict(record_dict)


@pytest.fixture
def pdf_config() -> SummaryPDFConfig:
    return SummaryPDFConfig()


@pytest.fixture
def logo_png(tmp_path):
    """A 160x80 PNG (2:1 aspect ratio)."""
    from PIL import Image

    path = tmp_path / "logo.png"
    Image.new("RGB", (160, 80), color=(0, 94, 165)).save(path)
    return path
