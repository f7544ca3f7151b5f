"""Shared test fixtures."""

from datetime import date, time, timedelta
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from hrmanager.domain.hr_manager import HrManager  # noqa: E402
from hrmanager.domain.models import Candidate, Interview, Position  # noqa: E402
from hrmanager.storage.json_storage import JsonHrManagerStorage  # noqa: E402

HR_MANAGER = Position(title="HR Manager")
DATA_ANALYST = Position(title="Data Analyst")


def make_candidate(name: str = "Amy Bee", **overrides) -> Candidate:
    values = {
        "name": name,
        "phone": "11111111",
        "email": "amy@x.com",
        "address": "123 Street",
        "positions": frozenset({HR_MANAGER}),
    }
    values.update(overrides)
    return Candidate(**values)


def make_interview(candidates, position: Position = HR_MANAGER, **overrides) -> Interview:
    values = {
        "position": position,
        "candidates": set(candidates),
        "date": date(2025, 1, 1),
        "start_time": time(9, 0),
        "duration": timedelta(minutes=60),
    }
    values.update(overrides)
    return Interview(**values)


@pytest.fixture
def amy() -> Candidate:
    return make_candidate()


@pytest.fixture
def bob() -> Candidate:
    return make_candidate(
        "Bob Choo", phone="22222222", email="bob@mail.com", address="Block 123",
        tags=frozenset({"friends"}),
    )


@pytest.fixture
def model(amy, bob) -> HrManager:
    """Two positions, two candidates and one interview for Amy."""
    hr = HrManager()
    hr.add_position(HR_MANAGER)
    hr.add_position(DATA_ANALYST)
    hr.add_candidate(amy)
    hr.add_candidate(bob)
    hr.add_interview(make_interview({amy}))
    return hr


@pytest.fixture
def storage(tmp_path) -> JsonHrManagerStorage:
    return JsonHrManagerStorage(
        tmp_path / "candidates.json",
        tmp_path / "positions.json",
        tmp_path / "interviews.json",
    )
