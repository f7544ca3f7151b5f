"""Tests for executing commands against an in-memory model."""

from dataclasses import replace
from datetime import date, time, timedelta
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from hrmanager.core import messages  # noqa: E402
from hrmanager.core.errors import CommandError  # noqa: E402
from hrmanager.domain.hr_manager import HrManager  # noqa: E402
from hrmanager.domain.models import InterviewStatus, Position, PositionStatus  # noqa: E402
from hrmanager.domain.predicates import (  # noqa: E402
    InterviewContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    TitleContainsKeywordsPredicate,
)
from hrmanager.logic.commands import (  # noqa: E402
    AddCandidateCommand,
    AddInterviewCommand,
    AddPositionCommand,
    AssignInterviewCommand,
    ClearCommand,
    DeleteCandidateCommand,
    DeleteInterviewCommand,
    DeletePositionCommand,
    EditCandidateCommand,
    EditCandidateDescriptor,
    EditPositionCommand,
    ExitCommand,
    FindCandidateCommand,
    FindInterviewCommand,
    FindPositionCommand,
    HelpCommand,
    ListCandidateCommand,
    RemarkCandidateCommand,
    SetInterviewStatusCommand,
)
from hrmanager.logic.commands.candidate import MESSAGE_POSITION_FILLED  # noqa: E402
from hrmanager.logic.commands.interview import MESSAGE_DUPLICATE_INTERVIEW  # noqa: E402

from conftest import DATA_ANALYST, HR_MANAGER, make_interview  # noqa: E402


def _snapshot(model: HrManager) -> HrManager:
    copy = HrManager()
    copy.reset_data(
        candidates=model.candidates.as_list(),
        positions=model.positions.as_list(),
        interviews=[i.copy_with() for i in model.interviews],
    )
    return copy


def _add_carl(**overrides) -> AddCandidateCommand:
    values = dict(
        name="Carl Kurz", phone="95352563", email="heinz@mail.com",
        address="wall street", position_titles=("data analyst",),
    )
    values.update(overrides)
    return AddCandidateCommand(**values)


def test_add_candidate_resolves_positions(model) -> None:
    result = _add_carl().execute(model)

    carl = model.find_candidate("Carl Kurz")
    assert carl.positions == frozenset({DATA_ANALYST})
    assert result.feedback_to_user == AddCandidateCommand.MESSAGE_SUCCESS % carl
    assert model.filtered_candidates[-1] == carl


@pytest.mark.parametrize(
    "command, message",
    [
        (_add_carl(name="AMY BEE"), AddCandidateCommand.MESSAGE_DUPLICATE_CANDIDATE),
        (_add_carl(position_titles=("Recruiter",)), messages.MESSAGE_POSITION_NOT_FOUND % "Recruiter"),
    ],
)
def test_add_candidate_failures_leave_model_unchanged(model, command, message) -> None:
    before = _snapshot(model)
    with pytest.raises(CommandError) as exc_info:
        command.execute(model)
    assert exc_info.value.message == message
    assert model == before


def test_add_candidate_rejects_filled_position(model) -> None:
    model.set_position(DATA_ANALYST, Position("Data Analyst", PositionStatus.FILLED))
    with pytest.raises(CommandError, match=MESSAGE_POSITION_FILLED % "Data Analyst"):
        _add_carl().execute(model)


def test_edit_candidate_overwrites_given_fields(model, bob) -> None:
    descriptor = EditCandidateDescriptor(phone="999", tags=frozenset(), position_titles=("Data Analyst",))
    EditCandidateCommand(2, descriptor).execute(model)

    edited = model.filtered_candidates[1]
    assert edited.name == bob.name
    assert edited.phone == "999"
    assert edited.tags == frozenset()
    assert edited.positions == frozenset({DATA_ANALYST})


def test_edit_candidate_rename_reaches_interviews(model) -> None:
    EditCandidateCommand(1, EditCandidateDescriptor(name="Amy Tan")).execute(model)
    interview = model.filtered_interviews[0]
    assert [c.name for c in interview.candidates] == ["Amy Tan"]


def test_edit_candidate_case_only_rename_is_allowed(model) -> None:
    EditCandidateCommand(1, EditCandidateDescriptor(name="amy bee")).execute(model)
    assert model.filtered_candidates[0].name == "amy bee"


def test_edit_candidate_rejects_duplicate_and_bad_index(model) -> None:
    with pytest.raises(CommandError, match=EditCandidateCommand.MESSAGE_DUPLICATE_CANDIDATE):
        EditCandidateCommand(2, EditCandidateDescriptor(name="Amy Bee")).execute(model)
    with pytest.raises(CommandError, match=messages.MESSAGE_INVALID_CANDIDATE_DISPLAYED_INDEX):
        EditCandidateCommand(3, EditCandidateDescriptor(phone="123")).execute(model)


def test_edit_candidate_keeps_filled_position_already_applied_for(model, bob) -> None:
    model.set_candidate(bob, replace(bob, positions=frozenset({DATA_ANALYST})))
    model.set_position(HR_MANAGER, Position("HR Manager", PositionStatus.FILLED))
    descriptor = EditCandidateDescriptor(position_titles=("HR Manager", "Data Analyst"))
    EditCandidateCommand(1, descriptor).execute(model)
    assert len(model.filtered_candidates[0].positions) == 2

    with pytest.raises(CommandError, match=MESSAGE_POSITION_FILLED % "HR Manager"):
        EditCandidateCommand(2, descriptor).execute(model)


def test_remark_candidate_adds_and_removes(model) -> None:
    result = RemarkCandidateCommand(1, "Likes tea").execute(model)
    assert model.filtered_candidates[0].remark == "Likes tea"
    assert result.feedback_to_user.startswith("Added remark")

    result = RemarkCandidateCommand(1, "").execute(model)
    assert model.filtered_candidates[0].remark == ""
    assert result.feedback_to_user.startswith("Removed remark")


def test_delete_candidate(model, bob) -> None:
    DeleteCandidateCommand(2).execute(model)
    assert not model.has_candidate(bob)


def test_delete_scheduled_candidate_is_rejected(model, amy) -> None:
    with pytest.raises(CommandError) as exc_info:
        DeleteCandidateCommand(1).execute(model)
    assert exc_info.value.message == (
        DeleteCandidateCommand.MESSAGE_CANDIDATE_STILL_SCHEDULED % "Amy Bee"
    )
    assert model.has_candidate(amy)


@pytest.mark.parametrize("index", [0, 3, 9])
def test_index_outside_displayed_list(model, index) -> None:
    with pytest.raises(CommandError, match=messages.MESSAGE_INVALID_CANDIDATE_DISPLAYED_INDEX):
        DeleteCandidateCommand(index).execute(model)


def test_index_refers_to_filtered_list(model, bob) -> None:
    result = FindCandidateCommand(NameContainsKeywordsPredicate(("choo",))).execute(model)
    assert result.feedback_to_user == messages.MESSAGE_CANDIDATES_LISTED_OVERVIEW % 1

    DeleteCandidateCommand(1).execute(model)
    assert not model.has_candidate(bob)
    assert len(model.filtered_candidates) == 0

    ListCandidateCommand().execute(model)
    assert len(model.filtered_candidates) == 1


def test_add_position_rejects_duplicate(model) -> None:
    AddPositionCommand(Position("Recruiter")).execute(model)
    with pytest.raises(CommandError, match=AddPositionCommand.MESSAGE_DUPLICATE_POSITION):
        AddPositionCommand(Position("RECRUITER")).execute(model)
    assert len(model.positions) == 3


def test_edit_position_status_reaches_candidates(model, amy) -> None:
    EditPositionCommand(1, status=PositionStatus.FILLED).execute(model)
    filled = model.filtered_positions[0]
    assert filled.status is PositionStatus.FILLED
    assert model.find_candidate(amy.name).positions == frozenset({filled})
    assert model.filtered_interviews[0].position == filled


def test_edit_position_rejects_duplicate_title(model) -> None:
    with pytest.raises(CommandError, match=AddPositionCommand.MESSAGE_DUPLICATE_POSITION):
        EditPositionCommand(2, title="HR Manager").execute(model)


def test_delete_position(model, bob) -> None:
    with pytest.raises(CommandError) as exc_info:
        DeletePositionCommand(1).execute(model)
    assert exc_info.value.message == (
        DeletePositionCommand.MESSAGE_POSITION_STILL_SCHEDULED % "HR Manager"
    )

    DeletePositionCommand(2).execute(model)
    assert [p.title for p in model.positions] == ["HR Manager"]


def test_find_position(model) -> None:
    result = FindPositionCommand(TitleContainsKeywordsPredicate(("data",))).execute(model)
    assert result.feedback_to_user == messages.MESSAGE_POSITIONS_LISTED_OVERVIEW % 1
    assert list(model.filtered_positions) == [DATA_ANALYST]


def test_add_interview(model, amy, bob) -> None:
    command = AddInterviewCommand(
        position_title="data analyst",
        candidate_names=("amy bee", "Bob Choo"),
        date=date(2025, 2, 1),
        start_time=time(14, 0),
        duration=timedelta(minutes=30),
    )
    command.execute(model)

    interview = model.filtered_interviews[1]
    assert interview.position == DATA_ANALYST
    assert interview.candidates == {amy, bob}
    assert interview.status is InterviewStatus.PENDING


def test_add_interview_failures(model) -> None:
    slot = dict(date=date(2025, 1, 1), start_time=time(9, 0), duration=timedelta(minutes=60))
    with pytest.raises(CommandError, match=MESSAGE_DUPLICATE_INTERVIEW):
        AddInterviewCommand("HR Manager", ("Amy Bee",), **slot).execute(model)
    with pytest.raises(CommandError, match=messages.MESSAGE_CANDIDATE_NOT_FOUND % "Zed"):
        AddInterviewCommand("HR Manager", ("Amy Bee", "Zed"), **slot).execute(model)
    with pytest.raises(CommandError, match=messages.MESSAGE_POSITION_NOT_FOUND % "Chef"):
        AddInterviewCommand("Chef", ("Amy Bee",), **slot).execute(model)
    assert len(model.interviews) == 1


def test_assign_interview_merges_candidates(model, amy, bob) -> None:
    AssignInterviewCommand(1, ("Bob Choo", "Amy Bee")).execute(model)
    assert model.filtered_interviews[0].candidates == {amy, bob}

    with pytest.raises(CommandError, match=AssignInterviewCommand.MESSAGE_ALREADY_ASSIGNED):
        AssignInterviewCommand(1, ("Bob Choo",)).execute(model)


def test_assign_interview_rejects_merge_into_existing_interview(model, amy, bob) -> None:
    model.add_interview(make_interview({amy, bob}))
    with pytest.raises(CommandError, match=MESSAGE_DUPLICATE_INTERVIEW):
        AssignInterviewCommand(1, ("Bob Choo",)).execute(model)
    assert model.filtered_interviews[0].candidates == {amy}


def test_set_interview_status_and_delete(model) -> None:
    result = SetInterviewStatusCommand(1, InterviewStatus.COMPLETED).execute(model)
    assert model.filtered_interviews[0].status is InterviewStatus.COMPLETED
    assert "COMPLETED" in result.feedback_to_user

    with pytest.raises(CommandError, match=messages.MESSAGE_INVALID_INTERVIEW_DISPLAYED_INDEX):
        DeleteInterviewCommand(2).execute(model)
    DeleteInterviewCommand(1).execute(model)
    assert len(model.interviews) == 0


def test_find_interview_matches_title_or_candidate(model) -> None:
    FindInterviewCommand(InterviewContainsKeywordsPredicate(("amy",))).execute(model)
    assert len(model.filtered_interviews) == 1
    FindInterviewCommand(InterviewContainsKeywordsPredicate(("analyst",))).execute(model)
    assert len(model.filtered_interviews) == 0
    FindInterviewCommand(InterviewContainsKeywordsPredicate(("manager",))).execute(model)
    assert len(model.filtered_interviews) == 1


def test_general_commands(model) -> None:
    assert HelpCommand().execute(model).show_help
    assert ExitCommand().execute(model).exit
    ClearCommand().execute(model)
    assert model == HrManager()
