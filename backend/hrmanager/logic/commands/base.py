"""Command base type and result."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Sequence, TypeVar

from ...core.errors import CommandError
from ...domain.hr_manager import HrManager

T = TypeVar("T")


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user plus flags telling the UI what else to do."""

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    """One executable user command.

    ``execute`` either leaves the model in a new valid state and returns a
    result, or raises ``CommandError`` before touching it.
    """

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]
    # Set on commands whose success must be followed by a save.
    MUTATES: ClassVar[bool] = False

    @abstractmethod
    def execute(self, model: HrManager) -> CommandResult:
        ...


def get_displayed(view: Sequence[T], index: int, message: str) -> T:
    """Resolve a 1-based index against the list the user currently sees."""
    if index < 1 or index > len(view):
        raise CommandError(message)
    return view[index - 1]
