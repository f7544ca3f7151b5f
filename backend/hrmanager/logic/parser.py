"""Turns a line of user input into a ``Command``.

The first whitespace-delimited word selects a sub-parser from ``COMMAND_PARSERS``;
the rest is split on prefixes such as ``n/`` or ``pos/``. A prefix only counts
when preceded by whitespace. Every failure is reported as ``ParseError``.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..core.errors import ParseError
from ..core.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from ..domain import fields
from ..domain.models import InterviewStatus, Position, PositionStatus
from ..domain.predicates import (
    InterviewContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    TitleContainsKeywordsPredicate,
)
from .commands import (
    AddCandidateCommand,
    AddInterviewCommand,
    AddPositionCommand,
    AssignInterviewCommand,
    ClearCommand,
    Command,
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
    ListInterviewCommand,
    ListPositionCommand,
    RemarkCandidateCommand,
    SetInterviewStatusCommand,
)

logger = logging.getLogger(__name__)

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_TAG = "tag/"
PREFIX_REMARK = "r/"
PREFIX_POSITION = "pos/"
PREFIX_CANDIDATE = "c/"
PREFIX_DATE = "d/"
PREFIX_TIME = "t/"
PREFIX_DURATION = "dur/"
PREFIX_STATUS = "s/"

MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)
_INDEX = re.compile(r"\d+")


class ArgumentMultimap:
    """Values captured for each prefix, in input order, plus the preamble."""

    def __init__(self, preamble: str = ""):
        self.preamble = preamble
        self._values: Dict[str, List[str]] = {}

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def has(self, prefix: str) -> bool:
        return prefix in self._values

    def get_value(self, prefix: str) -> Optional[str]:
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, []))

    def verify_no_duplicate_prefixes(self, usage: str, *prefixes: str) -> None:
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(duplicated), usage)


def tokenize(arguments: str, *prefixes: str) -> ArgumentMultimap:
    """Split ``arguments`` on the given prefixes."""
    text = " " + arguments
    found: List[Tuple[int, str]] = []
    for prefix in prefixes:
        for match in re.finditer(r"(?<=\s)" + re.escape(prefix), text):
            found.append((match.start(), prefix))
    found.sort()

    end_of_preamble = found[0][0] if found else len(text)
    argmap = ArgumentMultimap(text[:end_of_preamble].strip())
    for i, (start, prefix) in enumerate(found):
        end = found[i + 1][0] if i + 1 < len(found) else len(text)
        argmap.put(prefix, text[start + len(prefix):end].strip())
    return argmap


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT % usage, usage)


def _require(argmap: ArgumentMultimap, usage: str, *prefixes: str, preamble: bool = False) -> None:
    """Check mandatory prefixes are present and the preamble is (not) empty."""
    if not all(argmap.has(p) for p in prefixes):
        raise _invalid_format(usage)
    if bool(argmap.preamble) != preamble:
        raise _invalid_format(usage)


def _field(parse: Callable, value, usage: str):
    try:
        return parse(value)
    except ValueError as exc:
        raise ParseError(str(exc), usage) from exc


def _index(text: str, usage: str) -> int:
    """Parse a 1-based index; whether it is in range is checked on execution."""
    text = text.strip()
    if not _INDEX.fullmatch(text):
        raise _invalid_format(usage)
    return int(text)


def _titles(values: Iterable[str], usage: str) -> Tuple[str, ...]:
    return tuple(_field(fields.parse_title, v, usage) for v in values)


def _names(values: Iterable[str], usage: str) -> Tuple[str, ...]:
    return tuple(_field(fields.parse_name, v, usage) for v in values)


def _tags(values: List[str], usage: str) -> frozenset:
    return frozenset(_field(fields.parse_tag, v, usage) for v in values)


def _keywords(arguments: str, usage: str) -> Tuple[str, ...]:
    keywords = tuple(arguments.split())
    if not keywords:
        raise _invalid_format(usage)
    return keywords


# --- candidates -------------------------------------------------------------

def parse_add_candidate(arguments: str) -> AddCandidateCommand:
    usage = AddCandidateCommand.MESSAGE_USAGE
    argmap = tokenize(
        arguments, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
        PREFIX_TAG, PREFIX_POSITION,
    )
    _require(argmap, usage, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_POSITION)
    argmap.verify_no_duplicate_prefixes(
        usage, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
    )
    return AddCandidateCommand(
        name=_field(fields.parse_name, argmap.get_value(PREFIX_NAME), usage),
        phone=_field(fields.parse_phone, argmap.get_value(PREFIX_PHONE), usage),
        email=_field(fields.parse_email, argmap.get_value(PREFIX_EMAIL), usage),
        address=_field(fields.parse_address, argmap.get_value(PREFIX_ADDRESS), usage),
        position_titles=_titles(argmap.get_all_values(PREFIX_POSITION), usage),
        tags=_tags(argmap.get_all_values(PREFIX_TAG), usage),
    )


def parse_edit_candidate(arguments: str) -> EditCandidateCommand:
    usage = EditCandidateCommand.MESSAGE_USAGE
    argmap = tokenize(
        arguments, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
        PREFIX_TAG, PREFIX_POSITION,
    )
    index = _index(argmap.preamble, usage)
    argmap.verify_no_duplicate_prefixes(
        usage, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
    )

    def optional(prefix: str, parse: Callable):
        value = argmap.get_value(prefix)
        return None if value is None else _field(parse, value, usage)

    tags = None
    if argmap.has(PREFIX_TAG):
        # A lone empty "tag/" clears all tags.
        values = argmap.get_all_values(PREFIX_TAG)
        tags = frozenset() if values == [""] else _tags(values, usage)
    descriptor = EditCandidateDescriptor(
        name=optional(PREFIX_NAME, fields.parse_name),
        phone=optional(PREFIX_PHONE, fields.parse_phone),
        email=optional(PREFIX_EMAIL, fields.parse_email),
        address=optional(PREFIX_ADDRESS, fields.parse_address),
        tags=tags,
        position_titles=(
            _titles(argmap.get_all_values(PREFIX_POSITION), usage)
            if argmap.has(PREFIX_POSITION) else None
        ),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditCandidateCommand.MESSAGE_NOT_EDITED, usage)
    return EditCandidateCommand(index, descriptor)


def parse_remark_candidate(arguments: str) -> RemarkCandidateCommand:
    usage = RemarkCandidateCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_REMARK)
    if not argmap.has(PREFIX_REMARK):
        raise _invalid_format(usage)
    index = _index(argmap.preamble, usage)
    argmap.verify_no_duplicate_prefixes(usage, PREFIX_REMARK)
    return RemarkCandidateCommand(index, fields.parse_remark(argmap.get_value(PREFIX_REMARK)))


def parse_delete_candidate(arguments: str) -> DeleteCandidateCommand:
    return DeleteCandidateCommand(_index(arguments, DeleteCandidateCommand.MESSAGE_USAGE))


def parse_find_candidate(arguments: str) -> FindCandidateCommand:
    keywords = _keywords(arguments, FindCandidateCommand.MESSAGE_USAGE)
    return FindCandidateCommand(NameContainsKeywordsPredicate(keywords))


# --- positions --------------------------------------------------------------

def parse_add_position(arguments: str) -> AddPositionCommand:
    usage = AddPositionCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_POSITION)
    _require(argmap, usage, PREFIX_POSITION)
    argmap.verify_no_duplicate_prefixes(usage, PREFIX_POSITION)
    title = _field(fields.parse_title, argmap.get_value(PREFIX_POSITION), usage)
    return AddPositionCommand(Position(title=title))


def parse_edit_position(arguments: str) -> EditPositionCommand:
    usage = EditPositionCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_POSITION, PREFIX_STATUS)
    index = _index(argmap.preamble, usage)
    argmap.verify_no_duplicate_prefixes(usage, PREFIX_POSITION, PREFIX_STATUS)
    title = argmap.get_value(PREFIX_POSITION)
    status = argmap.get_value(PREFIX_STATUS)
    if title is None and status is None:
        raise ParseError(EditPositionCommand.MESSAGE_NOT_EDITED, usage)
    return EditPositionCommand(
        index,
        title=None if title is None else _field(fields.parse_title, title, usage),
        status=None if status is None else _field(PositionStatus.parse, status, usage),
    )


def parse_delete_position(arguments: str) -> DeletePositionCommand:
    return DeletePositionCommand(_index(arguments, DeletePositionCommand.MESSAGE_USAGE))


def parse_find_position(arguments: str) -> FindPositionCommand:
    keywords = _keywords(arguments, FindPositionCommand.MESSAGE_USAGE)
    return FindPositionCommand(TitleContainsKeywordsPredicate(keywords))


# --- interviews -------------------------------------------------------------

def parse_add_interview(arguments: str) -> AddInterviewCommand:
    usage = AddInterviewCommand.MESSAGE_USAGE
    argmap = tokenize(
        arguments, PREFIX_POSITION, PREFIX_CANDIDATE, PREFIX_DATE, PREFIX_TIME, PREFIX_DURATION,
    )
    _require(argmap, usage, PREFIX_POSITION, PREFIX_CANDIDATE, PREFIX_DATE, PREFIX_TIME, PREFIX_DURATION)
    argmap.verify_no_duplicate_prefixes(
        usage, PREFIX_POSITION, PREFIX_DATE, PREFIX_TIME, PREFIX_DURATION,
    )
    return AddInterviewCommand(
        position_title=_field(fields.parse_title, argmap.get_value(PREFIX_POSITION), usage),
        candidate_names=_names(argmap.get_all_values(PREFIX_CANDIDATE), usage),
        date=_field(fields.parse_date, argmap.get_value(PREFIX_DATE), usage),
        start_time=_field(fields.parse_time, argmap.get_value(PREFIX_TIME), usage),
        duration=_field(fields.parse_duration, argmap.get_value(PREFIX_DURATION), usage),
    )


def parse_assign_interview(arguments: str) -> AssignInterviewCommand:
    usage = AssignInterviewCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_CANDIDATE)
    if not argmap.has(PREFIX_CANDIDATE):
        raise _invalid_format(usage)
    index = _index(argmap.preamble, usage)
    return AssignInterviewCommand(index, _names(argmap.get_all_values(PREFIX_CANDIDATE), usage))


def parse_delete_interview(arguments: str) -> DeleteInterviewCommand:
    return DeleteInterviewCommand(_index(arguments, DeleteInterviewCommand.MESSAGE_USAGE))


def parse_set_interview_status(arguments: str) -> SetInterviewStatusCommand:
    usage = SetInterviewStatusCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_STATUS)
    if not argmap.has(PREFIX_STATUS):
        raise _invalid_format(usage)
    index = _index(argmap.preamble, usage)
    argmap.verify_no_duplicate_prefixes(usage, PREFIX_STATUS)
    status = _field(InterviewStatus.parse, argmap.get_value(PREFIX_STATUS), usage)
    return SetInterviewStatusCommand(index, status)


def parse_find_interview(arguments: str) -> FindInterviewCommand:
    keywords = _keywords(arguments, FindInterviewCommand.MESSAGE_USAGE)
    return FindInterviewCommand(InterviewContainsKeywordsPredicate(keywords))


# Every command word -> sub-parser mapping lives here.
COMMAND_PARSERS: Dict[str, Callable[[str], Command]] = {
    AddCandidateCommand.COMMAND_WORD: parse_add_candidate,
    EditCandidateCommand.COMMAND_WORD: parse_edit_candidate,
    RemarkCandidateCommand.COMMAND_WORD: parse_remark_candidate,
    DeleteCandidateCommand.COMMAND_WORD: parse_delete_candidate,
    FindCandidateCommand.COMMAND_WORD: parse_find_candidate,
    ListCandidateCommand.COMMAND_WORD: lambda _: ListCandidateCommand(),
    AddPositionCommand.COMMAND_WORD: parse_add_position,
    EditPositionCommand.COMMAND_WORD: parse_edit_position,
    DeletePositionCommand.COMMAND_WORD: parse_delete_position,
    FindPositionCommand.COMMAND_WORD: parse_find_position,
    ListPositionCommand.COMMAND_WORD: lambda _: ListPositionCommand(),
    AddInterviewCommand.COMMAND_WORD: parse_add_interview,
    AssignInterviewCommand.COMMAND_WORD: parse_assign_interview,
    DeleteInterviewCommand.COMMAND_WORD: parse_delete_interview,
    SetInterviewStatusCommand.COMMAND_WORD: parse_set_interview_status,
    FindInterviewCommand.COMMAND_WORD: parse_find_interview,
    ListInterviewCommand.COMMAND_WORD: lambda _: ListInterviewCommand(),
    ClearCommand.COMMAND_WORD: lambda _: ClearCommand(),
    HelpCommand.COMMAND_WORD: lambda _: HelpCommand(),
    ExitCommand.COMMAND_WORD: lambda _: ExitCommand(),
}


def parse_command(user_input: str) -> Command:
    """Parse one line of input.

    Raises:
        ParseError: the command word is unknown or its arguments are invalid.
    """
    match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
    if match is None:
        raise _invalid_format(HelpCommand.MESSAGE_USAGE)
    command_word = match.group("command_word")
    parser = COMMAND_PARSERS.get(command_word)
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    command = parser(match.group("arguments"))
    logger.debug("Parsed %s", type(command).__name__)
    return command
