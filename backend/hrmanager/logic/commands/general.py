"""Commands that are not tied to one kind of entity."""

from __future__ import annotations

from dataclasses import dataclass

from ...domain.hr_manager import HrManager
from .base import Command, CommandResult


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = COMMAND_WORD + ": Deletes all candidates, positions and interviews."
    MESSAGE_SUCCESS = "HR manager has been cleared!"
    MUTATES = True

    def execute(self, model: HrManager) -> CommandResult:
        model.reset_data()
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = COMMAND_WORD + ": Shows program usage instructions."
    MESSAGE_SUCCESS = "Opened help window."

    def execute(self, model: HrManager) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = COMMAND_WORD + ": Exits the program."
    MESSAGE_SUCCESS = "Exiting HR manager as requested ..."

    def execute(self, model: HrManager) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, exit=True)
