"""Interview commands."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time, timedelta
from typing import FrozenSet, Tuple

from ...core import messages
from ...core.errors import CommandError
from ...domain.hr_manager import HrManager
from ...domain.models import Candidate, Interview, InterviewStatus
from ...domain.predicates import InterviewContainsKeywordsPredicate
from .base import Command, CommandResult, get_displayed

MESSAGE_DUPLICATE_INTERVIEW = "This interview already exists in the HR manager"


def resolve_candidates(model: HrManager, names: Tuple[str, ...]) -> FrozenSet[Candidate]:
    """Look up every name in order, failing on the first unknown one."""
    candidates = []
    for name in names:
        candidate = model.find_candidate(name)
        if candidate is None:
            raise CommandError(messages.MESSAGE_CANDIDATE_NOT_FOUND % name)
        candidates.append(candidate)
    return frozenset(candidates)


@dataclass(frozen=True)
class AddInterviewCommand(Command):
    COMMAND_WORD = "add_i"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Schedules an interview. "
        "Parameters: pos/POSITION c/CANDIDATE... d/DD/MM/YYYY t/HHMM dur/MINUTES\n"
        "Example: " + COMMAND_WORD + " pos/HR Manager c/Alex Yeoh c/Bernice Yu "
        "d/21/10/2025 t/1400 dur/60"
    )
    MESSAGE_SUCCESS = "New interview added: %s"
    MUTATES = True

    position_title: str
    candidate_names: Tuple[str, ...]
    date: date
    start_time: time
    duration: timedelta

    def execute(self, model: HrManager) -> CommandResult:
        position = model.find_position(self.position_title)
        if position is None:
            raise CommandError(messages.MESSAGE_POSITION_NOT_FOUND % self.position_title)
        candidates = resolve_candidates(model, self.candidate_names)
        interview = Interview(
            position=position,
            candidates=set(candidates),
            date=self.date,
            start_time=self.start_time,
            duration=self.duration,
        )
        if model.has_interview(interview):
            raise CommandError(MESSAGE_DUPLICATE_INTERVIEW)
        model.add_interview(interview)
        return CommandResult(self.MESSAGE_SUCCESS % interview)


@dataclass(frozen=True)
class AssignInterviewCommand(Command):
    COMMAND_WORD = "assign_i"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Adds candidates to the interview identified by the index "
        "number used in the displayed interview list.\n"
        "Parameters: INDEX (must be a positive integer) c/CANDIDATE...\n"
        "Example: " + COMMAND_WORD + " 1 c/Charlotte Oliveiro"
    )
    MESSAGE_SUCCESS = "Candidates assigned: %s"
    MESSAGE_ALREADY_ASSIGNED = "All given candidates already attend this interview"
    MUTATES = True

    index: int
    candidate_names: Tuple[str, ...]

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_interviews, self.index,
            messages.MESSAGE_INVALID_INTERVIEW_DISPLAYED_INDEX,
        )
        candidates = resolve_candidates(model, self.candidate_names)
        if candidates <= target.candidates:
            raise CommandError(self.MESSAGE_ALREADY_ASSIGNED)
        merged = target.copy_with(candidates=target.candidates | candidates)
        if any(i is not target and i.is_same_interview(merged) for i in model.interviews):
            raise CommandError(MESSAGE_DUPLICATE_INTERVIEW)
        model.add_interview_candidates(target, candidates)
        return CommandResult(self.MESSAGE_SUCCESS % target)


@dataclass(frozen=True)
class DeleteInterviewCommand(Command):
    COMMAND_WORD = "delete_i"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Deletes the interview identified by the index number used "
        "in the displayed interview list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: " + COMMAND_WORD + " 1"
    )
    MESSAGE_SUCCESS = "Deleted interview: %s"
    MUTATES = True

    index: int

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_interviews, self.index,
            messages.MESSAGE_INVALID_INTERVIEW_DISPLAYED_INDEX,
        )
        model.remove_interview(target)
        return CommandResult(self.MESSAGE_SUCCESS % target)


@dataclass(frozen=True)
class SetInterviewStatusCommand(Command):
    COMMAND_WORD = "status_i"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Sets the status of the interview identified by the index "
        "number used in the displayed interview list.\n"
        "Parameters: INDEX (must be a positive integer) s/pending|completed\n"
        "Example: " + COMMAND_WORD + " 1 s/completed"
    )
    MESSAGE_SUCCESS = "Interview status updated: %s"
    MUTATES = True

    index: int
    status: InterviewStatus

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_interviews, self.index,
            messages.MESSAGE_INVALID_INTERVIEW_DISPLAYED_INDEX,
        )
        model.set_interview_status(target, self.status)
        return CommandResult(self.MESSAGE_SUCCESS % target)


@dataclass(frozen=True)
class FindInterviewCommand(Command):
    COMMAND_WORD = "find_i"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Finds all interviews whose position title or candidate "
        "names contain any of the specified keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: " + COMMAND_WORD + " manager alex"
    )

    predicate: InterviewContainsKeywordsPredicate

    def execute(self, model: HrManager) -> CommandResult:
        model.update_filtered_interviews(self.predicate)
        return CommandResult(
            messages.MESSAGE_INTERVIEWS_LISTED_OVERVIEW % len(model.filtered_interviews)
        )


@dataclass(frozen=True)
class ListInterviewCommand(Command):
    COMMAND_WORD = "list_i"
    MESSAGE_USAGE = COMMAND_WORD + ": Lists all interviews."
    MESSAGE_SUCCESS = "Listed all interviews"

    def execute(self, model: HrManager) -> CommandResult:
        model.update_filtered_interviews(None)
        return CommandResult(self.MESSAGE_SUCCESS)
