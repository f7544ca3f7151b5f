"""Single entry point through which the UI runs commands."""

from __future__ import annotations

import logging

from ..core.errors import CommandError, StorageError
from ..core.logging import command_context
from ..domain.hr_manager import HrManager
from ..domain.models import Candidate, Interview, Position
from ..domain.unique_list import FilteredList
from ..storage.json_storage import JsonHrManagerStorage
from .commands import CommandResult
from .parser import parse_command

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_MESSAGE = "Could not save data to file: "


class LogicManager:
    """Parses, executes and persists commands against one ``HrManager``."""

    def __init__(self, model: HrManager, storage: JsonHrManagerStorage):
        self.model = model
        self.storage = storage

    def execute(self, command_text: str) -> CommandResult:
        """Run one line of user input.

        Successful mutating commands are saved before returning. If the save
        fails the mutation stays in memory and ``CommandError`` reports the
        I/O fault, so the caller knows memory and disk now disagree.

        Raises:
            ParseError: the input is not a valid command.
            CommandError: the command failed, or its result could not be saved.
        """
        with command_context():
            logger.info("User command: %s", command_text)
            command = parse_command(command_text)
            result = command.execute(self.model)
            if command.MUTATES:
                try:
                    self.storage.save_hr_manager(self.model)
                except StorageError as exc:
                    logger.error("Save failed after %s: %s", command.COMMAND_WORD, exc)
                    raise CommandError(FILE_OPS_ERROR_MESSAGE + exc.message) from exc
            logger.info("Result: %s", result.feedback_to_user)
            return result

    @property
    def filtered_candidates(self) -> FilteredList[Candidate]:
        return self.model.filtered_candidates

    @property
    def filtered_positions(self) -> FilteredList[Position]:
        return self.model.filtered_positions

    @property
    def filtered_interviews(self) -> FilteredList[Interview]:
        return self.model.filtered_interviews
