"""Tests for application type classification."""

from __future__ import annotations

import pytest

from application_summary.classifier import ApplicationType, classify
from tests.fakes.records import make_record, simple, theme


def _about(*questions):
    return theme("about-application", list(questions))


def _crime(duration):
    return theme("crime", [simple("q-applicant-did-the-crime-happen-once-or-over-time", duration)])


class TestFatalClaims:
    @pytest.mark.parametrize("claim_type", ["funeral", True, "both"])
    def test_claim_type_makes_funeral(self, claim_type) -> None:
        record = make_record(
            [_about(simple("q-applicant-fatal-claim", True), simple("q-applicant-claim-type", claim_type))]
        )
        assert classify(record) is ApplicationType.FUNERAL

    def test_split_funeral_flag_makes_funeral(self) -> None:
        record = make_record([_about(simple("q-applicant-fatal-claim", True))], meta={"splitFuneral": True})
        assert classify(record) is ApplicationType.FUNERAL

    def test_fatal_without_claim_type(self) -> None:
        record = make_record([_about(simple("q-applicant-fatal-claim", True))])
        assert classify(record) is ApplicationType.FATAL

    def test_falsy_claim_type_is_fatal(self) -> None:
        record = make_record(
            [_about(simple("q-applicant-fatal-claim", True), simple("q-applicant-claim-type", False))],
            meta={"splitFuneral": False},
        )
        assert classify(record) is ApplicationType.FATAL

    def test_fatal_wins_over_crime_duration(self) -> None:
        record = make_record([_about(simple("q-applicant-fatal-claim", True)), _crime("once")])
        assert classify(record) is ApplicationType.FATAL


class TestCrimeDuration:
    def test_over_a_period_of_time(self) -> None:
        record = make_record([_about(simple("q-applicant-fatal-claim", False)), _crime("over-a-period-of-time")])
        assert classify(record) is ApplicationType.PERIOD_OF_ABUSE

    def test_once(self) -> None:
        record = make_record([_about(simple("q-applicant-fatal-claim", False)), _crime("once")])
        assert classify(record) is ApplicationType.PERSONAL_INJURY

    def test_unrecognised_duration(self) -> None:
        record = make_record([_crime("not-sure")])
        assert classify(record) is ApplicationType.UNKNOWN


class TestMissingReferenceData:
    def test_no_themes(self) -> None:
        assert classify(make_record([])) is ApplicationType.UNKNOWN

    def test_themes_without_the_questions(self) -> None:
        record = make_record([theme("about-application", []), theme("crime", [])])
        assert classify(record) is ApplicationType.UNKNOWN

    def test_crime_theme_missing(self) -> None:
        record = make_record([_about(simple("q-applicant-fatal-claim", False))])
        assert classify(record) is ApplicationType.UNKNOWN

    def test_sample_record(self, record) -> None:
        assert classify(record) is ApplicationType.PERSONAL_INJURY


class TestApplicationTypeLabels:
    def test_labels(self) -> None:
        assert [t.value for t in ApplicationType] == [
            "Funeral",
            "Fatal",
            "Period of abuse",
            "Personal injury",
            "Unknown",
        ]
