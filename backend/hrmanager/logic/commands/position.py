"""Position commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core import messages
from ...core.errors import CommandError
from ...domain.hr_manager import HrManager
from ...domain.models import Position, PositionStatus
from ...domain.predicates import TitleContainsKeywordsPredicate
from .base import Command, CommandResult, get_displayed


@dataclass(frozen=True)
class AddPositionCommand(Command):
    COMMAND_WORD = "add_p"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Adds a position to the HR manager. "
        "Parameters: pos/TITLE\n"
        "Example: " + COMMAND_WORD + " pos/Data Analyst"
    )
    MESSAGE_SUCCESS = "New position added: %s"
    MESSAGE_DUPLICATE_POSITION = "This position already exists in the HR manager"
    MUTATES = True

    position: Position

    def execute(self, model: HrManager) -> CommandResult:
        if model.has_position(self.position):
            raise CommandError(self.MESSAGE_DUPLICATE_POSITION)
        model.add_position(self.position)
        return CommandResult(self.MESSAGE_SUCCESS % self.position)


@dataclass(frozen=True)
class EditPositionCommand(Command):
    COMMAND_WORD = "edit_p"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Edits the position identified by the index number used in "
        "the displayed position list.\n"
        "Parameters: INDEX (must be a positive integer) [pos/TITLE] [s/open|filled]\n"
        "Example: " + COMMAND_WORD + " 1 s/filled"
    )
    MESSAGE_SUCCESS = "Edited position: %s"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MUTATES = True

    index: int
    title: Optional[str] = None
    status: Optional[PositionStatus] = None

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_positions, self.index,
            messages.MESSAGE_INVALID_POSITION_DISPLAYED_INDEX,
        )
        edited = Position(
            title=self.title if self.title is not None else target.title,
            status=self.status if self.status is not None else target.status,
        )
        if not target.is_same_position(edited) and model.has_position(edited):
            raise CommandError(AddPositionCommand.MESSAGE_DUPLICATE_POSITION)
        model.set_position(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS % edited)


@dataclass(frozen=True)
class DeletePositionCommand(Command):
    COMMAND_WORD = "delete_p"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Deletes the position identified by the index number used "
        "in the displayed position list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: " + COMMAND_WORD + " 1"
    )
    MESSAGE_SUCCESS = "Deleted position: %s"
    MESSAGE_POSITION_STILL_SCHEDULED = (
        "Cannot delete %s: position still scheduled for an interview"
    )
    MUTATES = True

    index: int

    def execute(self, model: HrManager) -> CommandResult:
        target = get_displayed(
            model.filtered_positions, self.index,
            messages.MESSAGE_INVALID_POSITION_DISPLAYED_INDEX,
        )
        if model.is_position_scheduled(target):
            raise CommandError(self.MESSAGE_POSITION_STILL_SCHEDULED % target.title)
        model.remove_position(target)
        return CommandResult(self.MESSAGE_SUCCESS % target)


@dataclass(frozen=True)
class FindPositionCommand(Command):
    COMMAND_WORD = "find_p"
    MESSAGE_USAGE = (
        COMMAND_WORD + ": Finds all positions whose titles contain any of "
        "the specified keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: " + COMMAND_WORD + " manager analyst"
    )

    predicate: TitleContainsKeywordsPredicate

    def execute(self, model: HrManager) -> CommandResult:
        model.update_filtered_positions(self.predicate)
        return CommandResult(
            messages.MESSAGE_POSITIONS_LISTED_OVERVIEW % len(model.filtered_positions)
        )


@dataclass(frozen=True)
class ListPositionCommand(Command):
    COMMAND_WORD = "list_p"
    MESSAGE_USAGE = COMMAND_WORD + ": Lists all positions."
    MESSAGE_SUCCESS = "Listed all positions"

    def execute(self, model: HrManager) -> CommandResult:
        model.update_filtered_positions(None)
        return CommandResult(self.MESSAGE_SUCCESS)
