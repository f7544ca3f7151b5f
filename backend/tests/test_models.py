"""Tests for domain entities and field validators."""

from dataclasses import replace
from datetime import date, time, timedelta
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from hrmanager.domain import fields  # noqa: E402
from hrmanager.domain.models import (  # noqa: E402
    InterviewStatus,
    Position,
    PositionStatus,
)

from conftest import DATA_ANALYST, HR_MANAGER, make_candidate, make_interview  # noqa: E402


def test_candidate_weak_identity_ignores_case_and_other_fields() -> None:
    amy = make_candidate()
    other = make_candidate("AMY BEE", phone="999", email="other@mail.com")
    assert amy.is_same_candidate(other)
    assert amy != other
    assert not amy.is_same_candidate(make_candidate("Amy Tan"))
    assert not amy.is_same_candidate(None)


def test_position_weak_identity_ignores_case_and_status() -> None:
    filled = Position(title="hr manager", status=PositionStatus.FILLED)
    assert HR_MANAGER.is_same_position(filled)
    assert HR_MANAGER != filled
    assert not HR_MANAGER.is_same_position(DATA_ANALYST)


def test_interview_defaults_to_pending() -> None:
    interview = make_interview({make_candidate()})
    assert interview.status is InterviewStatus.PENDING


def test_interview_requires_a_candidate() -> None:
    with pytest.raises(ValueError):
        make_interview(set())


def test_same_interview_is_reflexive_symmetric_and_ignores_status() -> None:
    interview = make_interview({make_candidate()})
    completed = interview.copy_with(status=InterviewStatus.COMPLETED)

    assert interview.is_same_interview(interview)
    assert interview.is_same_interview(completed)
    assert completed.is_same_interview(interview)
    assert interview != completed


@pytest.mark.parametrize(
    "change",
    [
        {"date": date(2025, 1, 2)},
        {"start_time": time(10, 0)},
        {"duration": timedelta(minutes=30)},
        {"position": DATA_ANALYST},
    ],
)
def test_different_slot_or_position_is_not_same_interview(change) -> None:
    amy = make_candidate()
    assert not make_interview({amy}).is_same_interview(make_interview({amy}, **change))


def test_different_candidates_is_not_same_interview() -> None:
    amy = make_candidate()
    bob = make_candidate("Bob Choo")
    assert not make_interview({amy}).is_same_interview(make_interview({amy, bob}))


def test_add_candidates_merges() -> None:
    amy = make_candidate()
    bob = make_candidate("Bob Choo")
    interview = make_interview({amy})
    interview.add_candidates([bob, amy])
    assert interview.candidates == {amy, bob}


def test_end_time_wraps_past_midnight() -> None:
    interview = make_interview(
        {make_candidate()}, start_time=time(23, 30), duration=timedelta(minutes=90)
    )
    assert interview.end_time == time(1, 0)


def test_candidate_position_replacement() -> None:
    amy = make_candidate(positions=frozenset({HR_MANAGER, DATA_ANALYST}))
    filled = replace(HR_MANAGER, status=PositionStatus.FILLED)
    assert filled in amy.with_position_replaced(HR_MANAGER, filled).positions
    assert amy.without_position(HR_MANAGER).positions == frozenset({DATA_ANALYST})


@pytest.mark.parametrize("value", ["", "PENDING", "pending", "  Completed "])
def test_interview_status_parse_accepts(value) -> None:
    expected = InterviewStatus.COMPLETED if "omplet" in value else InterviewStatus.PENDING
    assert InterviewStatus.parse(value) is expected


def test_interview_status_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        InterviewStatus.parse("cancelled")


def test_statuses_have_only_their_values() -> None:
    assert [s.value for s in InterviewStatus] == ["PENDING", "COMPLETED"]
    assert [s.value for s in PositionStatus] == ["OPEN", "FILLED"]


@pytest.mark.parametrize(
    "parse, value",
    [
        (fields.parse_name, ""),
        (fields.parse_name, "Amy*"),
        (fields.parse_phone, "12a45"),
        (fields.parse_phone, "12"),
        (fields.parse_email, "amy"),
        (fields.parse_email, "amy@"),
        (fields.parse_email, "Amy Bee <amy@x.com>"),
        (fields.parse_address, "  "),
        (fields.parse_tag, "best friend"),
        (fields.parse_title, " "),
        (fields.parse_date, "2025-01-01"),
        (fields.parse_date, "31/02/2025"),
        (fields.parse_date, "1/1/2025"),
        (fields.parse_time, "9:00"),
        (fields.parse_time, "2460"),
        (fields.parse_duration, "0"),
        (fields.parse_duration, "-5"),
        (fields.parse_duration, "1.5"),
        (fields.parse_duration, 0),
        (fields.parse_duration, 10**17),
    ],
)
def test_field_validators_reject(parse, value) -> None:
    with pytest.raises(ValueError):
        parse(value)


def test_field_validators_accept() -> None:
    assert fields.parse_name(" Amy Bee ") == "Amy Bee"
    assert fields.parse_email("amy@x.com") == "amy@x.com"
    assert fields.parse_email("Amy.Bee@Mail.COM") == "Amy.Bee@Mail.COM"
    assert fields.parse_date("01/01/2025") == date(2025, 1, 1)
    assert fields.parse_time("0900") == time(9, 0)
    assert fields.parse_duration("60") == timedelta(minutes=60)
    assert fields.parse_duration(45) == timedelta(minutes=45)
    assert fields.duration_minutes(timedelta(minutes=90)) == 90
    assert fields.format_date(date(2025, 3, 4)) == "04/03/2025"
    assert fields.format_time(time(7, 5)) == "0705"
