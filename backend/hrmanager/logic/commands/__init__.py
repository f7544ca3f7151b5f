"""Executable commands, one class per command word."""

from .base import Command, CommandResult
from .candidate import (
    AddCandidateCommand,
    DeleteCandidateCommand,
    EditCandidateCommand,
    EditCandidateDescriptor,
    FindCandidateCommand,
    ListCandidateCommand,
    RemarkCandidateCommand,
)
from .general import ClearCommand, ExitCommand, HelpCommand
from .interview import (
    AddInterviewCommand,
    AssignInterviewCommand,
    DeleteInterviewCommand,
    FindInterviewCommand,
    ListInterviewCommand,
    SetInterviewStatusCommand,
)
from .position import (
    AddPositionCommand,
    DeletePositionCommand,
    EditPositionCommand,
    FindPositionCommand,
    ListPositionCommand,
)

__all__ = [
    "Command",
    "CommandResult",
    "AddCandidateCommand",
    "DeleteCandidateCommand",
    "EditCandidateCommand",
    "EditCandidateDescriptor",
    "FindCandidateCommand",
    "ListCandidateCommand",
    "RemarkCandidateCommand",
    "ClearCommand",
    "ExitCommand",
    "HelpCommand",
    "AddInterviewCommand",
    "AssignInterviewCommand",
    "DeleteInterviewCommand",
    "FindInterviewCommand",
    "ListInterviewCommand",
    "SetInterviewStatusCommand",
    "AddPositionCommand",
    "DeletePositionCommand",
    "EditPositionCommand",
    "FindPositionCommand",
    "ListPositionCommand",
]
