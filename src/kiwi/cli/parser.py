# src/kiwi/cli/parser.py

"""
Command parser.

A raw line is split once on the first run of whitespace into (word, rest);
the word is case-insensitive, the rest keeps its case. Arguments are trimmed
and validated here (including date/time tokens), so the executor only ever
sees well-formed commands. Failures come back as a UserError value.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from ..core.errors import DateTimeFormatError, UserError
from ..core.ports import Clock
from ..tasks.datetime_codec import parse_datetime

BY_SEP = " /by "
FROM_SEP = " /from "
TO_SEP = " /to "

UNKNOWN_COMMAND_MSG = "Command not recognised! Type 'help' to see what I understand."
DEADLINE_FORMAT_MSG = "Invalid format. Use: deadline <task> /by <yyyy-MM-dd HHmm | HHmm>"
EVENT_FORMAT_MSG = (
    "Invalid format. Use: event <task> /from <yyyy-MM-dd HHmm | HHmm> "
    "/to <yyyy-MM-dd HHmm | HHmm>"
)

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class CommandKind(StrEnum):
    """Command words (the value is what the user types)."""

    BYE = "bye"
    LIST = "list"
    HELP = "help"
    CLEAR = "clear"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"


@dataclass(frozen=True, slots=True)
class Command:
    """
    A parsed user intent.

    Only the fields of the given kind are set:
    - todo: description
    - deadline: description, by
    - event: description, start, end
    - mark/unmark/delete: index (1-based, >= 1)
    - find: keyword
    """

    kind: CommandKind
    description: str | None = None
    by: datetime | None = None
    start: datetime | None = None
    end: datetime | None = None
    index: int | None = None
    keyword: str | None = None


ArgParser = Callable[[CommandKind, str, Clock], Command]


class _ParseFailure(Exception):
    """Internal: carries a display message up to parse()."""


def _description(raw: str, empty_message: str) -> str:
    desc = raw.strip()
    if not desc:
        raise _ParseFailure(empty_message)
    if "|" in desc:
        raise _ParseFailure("Description cannot contain '|'")
    return desc


def _datetime(token: str, default_date: date) -> datetime:
    try:
        return parse_datetime(token.strip(), default_date)
    except DateTimeFormatError as e:
        raise _ParseFailure(str(e)) from e


# ---- per-command argument parsers ----


def _no_args(kind: CommandKind, rest: str, clock: Clock) -> Command:
    if rest:
        raise _ParseFailure(f"'{kind.value}' does not take any arguments")
    return Command(kind)


def _todo(kind: CommandKind, rest: str, clock: Clock) -> Command:
    return Command(kind, description=_description(rest, "Todo description cannot be empty"))


def _deadline(kind: CommandKind, rest: str, clock: Clock) -> Command:
    desc, sep, by_raw = rest.partition(BY_SEP)
    if not sep or not desc.strip() or not by_raw.strip():
        raise _ParseFailure(DEADLINE_FORMAT_MSG)
    description = _description(desc, DEADLINE_FORMAT_MSG)
    by = _datetime(by_raw, clock.today())
    return Command(kind, description=description, by=by)


def _event(kind: CommandKind, rest: str, clock: Clock) -> Command:
    # "/from" must come before "/to": anything after "/from" is searched for "/to".
    desc, sep_from, after_from = rest.partition(FROM_SEP)
    if not sep_from:
        raise _ParseFailure(EVENT_FORMAT_MSG)
    from_raw, sep_to, to_raw = after_from.partition(TO_SEP)
    if not sep_to or not desc.strip() or not from_raw.strip() or not to_raw.strip():
        raise _ParseFailure(EVENT_FORMAT_MSG)

    description = _description(desc, EVENT_FORMAT_MSG)
    start = _datetime(from_raw, clock.today())
    # A time-only /to falls on the /from date.
    end = _datetime(to_raw, start.date())
    return Command(kind, description=description, start=start, end=end)


def _index(kind: CommandKind, rest: str, clock: Clock) -> Command:
    if not rest:
        raise _ParseFailure(f"{kind.value} needs a task number")
    if not _INDEX_RE.fullmatch(rest):
        raise _ParseFailure(f"Invalid task number: {rest}")
    index = int(rest)
    if index < 1:
        raise _ParseFailure("Task number must be 1 or higher")
    return Command(kind, index=index)


def _find(kind: CommandKind, rest: str, clock: Clock) -> Command:
    if not rest:
        raise _ParseFailure("Find keyword cannot be empty")
    return Command(kind, keyword=rest)


_ARG_PARSERS: dict[CommandKind, ArgParser] = {
    CommandKind.BYE: _no_args,
    CommandKind.LIST: _no_args,
    CommandKind.HELP: _no_args,
    CommandKind.CLEAR: _no_args,
    CommandKind.TODO: _todo,
    CommandKind.DEADLINE: _deadline,
    CommandKind.EVENT: _event,
    CommandKind.MARK: _index,
    CommandKind.UNMARK: _index,
    CommandKind.DELETE: _index,
    CommandKind.FIND: _find,
}


def split_command(line: str) -> tuple[str, str]:
    """(lowercased command word, trimmed rest)."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    word = parts[0].lower()
    rest = parts[1].strip() if len(parts) > 1 else ""
    return word, rest


def parse(line: str, clock: Clock) -> Command | UserError:
    """Parse one input line. Never raises for bad input."""
    word, rest = split_command(line)
    try:
        kind = CommandKind(word)
    except ValueError:
        return UserError(UNKNOWN_COMMAND_MSG)

    try:
        return _ARG_PARSERS[kind](kind, rest, clock)
    except _ParseFailure as e:
        return UserError(str(e))
