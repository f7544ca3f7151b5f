"""Candidate commands."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Optional, Tuple

from ...core import messages
from ...core.errors import CommandError
from ...domain.hr_manager import HrManager
from ...domain.models import Candidate, Position, PositionStatus
from ...domain.predicates import NameContainsKeywordsPredicate
from .base import Command, CommandResult, get_displayed

MESSAGE_POSITION_FILLED = "Position %s is already filled"


def resolve_positions(
    model: HrManager,
    titles: Tuple[str, ...],
    already_applied: FrozenSet[Position] = frozenset(),
) -> FrozenSet[Position]:
    """Look up every title, failing on the first one that is unknown.

    Filled positions are only accepted if the candidate already applied.
    """
    positions = []
    for title in titles:
        position = model.find_position(title)
        if position is None:
            raise CommandError(messages.MESSAGE_POSITION_NOT_FOUND % title)
        if position.status is PositionStatus.FILLED and position not in already_applied:
            raise CommandError(MESSAGE_POSITION_FILLED % position.title)
        positions.append(position)
    return frozenset(positions)


@dataclass(frozen=True)
class AddCandidateCommand(Command):
    COMMAND_WORD = "add_c"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Adds a candidate to the HR manager. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS pos/POSITION... [tag/TAG]...\n"
        "Example: " + COMMAND_WORD + " n/John Doe p/98765432 e/johnd@mail.com "
        "a/311, Clementi Ave 2, #02-25 pos/HR Manager tag/friends"
    )
    MESSAGE_SUCCESS = "New candidate added: %s"
    MESSAGE_DUPLICATE_CANDIDATE = "This candidate already exists in the HR manager"
    MUTATES = True

    name: str
    phone: str
    email: str
    address: str
    position_titles: Tuple[str, ...]
    tags: FrozenSet[str] = frozenset()

    def execute(self, model: HrManager) -> CommandResult:
        positions = resolve_positions(model, self.position_titles)
        candidate = Candidate(
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            tags=self.tags,
            positions=positions,
        )
        if model.has_candidate(candidate):
            raise CommandError(self.MESSAGE_DUPLICATE_CANDIDATE)
        model.add_candidate(candidate)
        return CommandResult(self.MESSAGE_SUCCESS % candidate)


@dataclass(frozen=True)
class EditCandidateDescriptor:
    """Fields to change; ``None`` leaves the field as it is."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: Optional[FrozenSet[str]] = None
    position_titles: Optional[Tuple[str, ...]] = None

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (
                self.name, self.phone, self.email, self.address,
                self.tags, self.position_titles,
            )
        )


@dataclass(frozen=True)
class EditCandidateCommand(Command):
    COMMAND_WORD = "edit_c"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Edits the candidate identified by the index number used in "
        "the displayed candidate list. Existing values will be overwritten.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] "
        "[e/EMAIL] [a/ADDRESS] [pos/POSITION]... [tag/TAG]...\n"
        "Example: " + COMMAND_WORD + " 1 p/91234567 e/johndoe@mail.com"
    )
    MESSAGE_SUCCESS = "Edited candidate: %s"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_CANDIDATE = AddCandidateCommand.MESSAGE_DUPLICATE_CANDIDATE
    MUTATES = True

    index: int
    descriptor: EditCandidateDescriptor

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_candidates, self.index,
            messages.MESSAGE_INVALID_CANDIDATE_DISPLAYED_INDEX,
        )
        d = self.descriptor
        positions = (
            target.positions if d.position_titles is None
            else resolve_positions(model, d.position_titles, target.positions)
        )
        edited = replace(
            target,
            name=d.name if d.name is not None else target.name,
            phone=d.phone if d.phone is not None else target.phone,
            email=d.email if d.email is not None else target.email,
            address=d.address if d.address is not None else target.address,
            tags=d.tags if d.tags is not None else target.tags,
            positions=positions,
        )
        if not target.is_same_candidate(edited) and model.has_candidate(edited):
            raise CommandError(self.MESSAGE_DUPLICATE_CANDIDATE)
        model.set_candidate(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS % edited)


@dataclass(frozen=True)
class RemarkCandidateCommand(Command):
    COMMAND_WORD = "remark_c"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Edits the remark of the candidate identified by the index "
        "number used in the displayed candidate list. An empty remark removes it.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        "Example: " + COMMAND_WORD + " 1 r/Likes to swim."
    )
    MESSAGE_ADD_REMARK_SUCCESS = "Added remark to candidate: %s"
    MESSAGE_DELETE_REMARK_SUCCESS = "Removed remark from candidate: %s"
    MUTATES = True

    index: int
    remark: str

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_candidates, self.index,
            messages.MESSAGE_INVALID_CANDIDATE_DISPLAYED_INDEX,
        )
        edited = replace(target, remark=self.remark)
        model.set_candidate(target, edited)
        message = (
            self.MESSAGE_ADD_REMARK_SUCCESS if self.remark
            else self.MESSAGE_DELETE_REMARK_SUCCESS
        )
        return CommandResult(message % edited)


@dataclass(frozen=True)
class DeleteCandidateCommand(Command):
    COMMAND_WORD = "delete_c"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Deletes the candidate identified by the index number used "
        "in the displayed candidate list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: " + COMMAND_WORD + " 1"
    )
    MESSAGE_SUCCESS = "Deleted candidate: %s"
    MESSAGE_CANDIDATE_STILL_SCHEDULED = (
        "Cannot delete %s: candidate still scheduled for an interview"
    )
    MUTATES = True

    index: int

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_candidates, self.index,
            messages.MESSAGE_INVALID_CANDIDATE_DISPLAYED_INDEX,
        )
        if model.is_candidate_scheduled(target):
            raise CommandError(self.MESSAGE_CANDIDATE_STILL_SCHEDULED % target.name)
        model.remove_candidate(target)
        return CommandResult(self.MESSAGE_SUCCESS % target)


@dataclass(frozen=True)
class FindCandidateCommand(Command):
    COMMAND_WORD = "find_c"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Finds all candidates whose names contain any of "
        "the specified keywords (case-insensitive) and displays them as a list "
        "with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: " + COMMAND_WORD + " alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: HrManager) -> CommandResult:
        model.update_filtered_candidates(self.predicate)
        return CommandResult(
            messages.MESSAGE_CANDIDATES_LISTED_OVERVIEW % len(model.filtered_candidates)
        )


@dataclass(frozen=True)
class ListCandidateCommand(Command):
    COMMAND_WORD = "list_c"
    MESSAGE_USAGE = COMMAND_WORD + ": Lists all candidates."
    MESSAGE_SUCCESS = "Listed all candidates"

    def execute(self, model: HrManager) -> CommandResult:
        model.update_filtered_candidates(None)
        return CommandResult(self.MESSAGE_SUCCESS)
