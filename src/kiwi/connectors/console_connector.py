# src/kiwi/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import process_line, replace_duplicate
from ..cli.parser import CommandKind, split_command
from ..core.state import AppState, Reply

logger = logging.getLogger(__name__)

WELCOME_MSG = "Hello! I'm Kiwi\nWhat can i do for you?"
PROMPT = "> "
CONFIRM_CLEAR_PROMPT = "Are you sure you want to delete all tasks? [y/n]: "
CLEAR_CANCELLED_MSG = "Clear cancelled."
REPLACE_PROMPT = "Replace with new task? [y/n]: "

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


def _ask_yes(read_line: ReadLine, prompt: str) -> bool:
    try:
        answer = read_line(prompt)
    except (EOFError, KeyboardInterrupt):
        return False
    return answer.strip().lower() in ("y", "yes")


def _handle_line(state: AppState, line: str, read_line: ReadLine, write: WriteLine) -> Reply | None:
    word, rest = split_command(line)
    # Only a well-formed "clear" is confirmed; anything else gets its parse error.
    if (
        word == CommandKind.CLEAR.value
        and not rest
        and state.settings.confirm_clear
        and len(state.tasks) > 0
        and not _ask_yes(read_line, CONFIRM_CLEAR_PROMPT)
    ):
        write(CLEAR_CANCELLED_MSG)
        return None

    reply = process_line(state, line)
    write(reply.response)

    if reply.duplicate_index is not None and state.settings.offer_replace:
        if _ask_yes(read_line, REPLACE_PROMPT):
            write(replace_duplicate(state, reply).response)
    return reply


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: WriteLine = print,
) -> None:
    """
    Interactive REPL: one command per line until "bye".
    EOF / Ctrl-C are treated as "bye" so the list is still saved.
    """
    logger.info("Console connector started (%d tasks).", len(state.tasks))
    write(WELCOME_MSG)
    write(process_line(state, CommandKind.LIST.value).response)

    while True:
        try:
            line = read_line(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed, saving and exiting.")
            write("")
            line = CommandKind.BYE.value

        if not line:
            continue

        try:
            reply = _handle_line(state, line, read_line, write)
        except Exception:
            logger.exception("Command handler crashed.")
            write("Internal error while handling a command.")
            continue

        if reply is not None and reply.stop:
            break

    logger.info("Console connector finished.")

