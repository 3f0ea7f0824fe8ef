# src/kiwi/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.errors import StorageError, TaskIndexError, TaskValidationError, UserError
from ..core.ports import TaskRepo
from ..core.state import AppState, Reply
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .parser import Command, CommandKind, parse

CommandHandler = Callable[[Command, TaskList, TaskRepo], Reply]

logger = logging.getLogger(__name__)

BYE_MSG = "Byebye. Hope to see you again soon!"
INVALID_INDEX_MSG = "Please enter a valid task number"
EMPTY_LIST_MSG = "No tasks yet!"
NO_MATCHES_MSG = "No matching tasks found."
CLEARED_MSG = "All tasks have been cleared!"
ALREADY_EMPTY_MSG = "Task list is already empty!"


class CommandRegistry:
    """Maps each command kind to its handler and help line."""

    def __init__(self) -> None:
        self._handlers: dict[CommandKind, CommandHandler] = {}
        self._help: dict[CommandKind, tuple[str, str]] = {}

    def register(
        self,
        kind: CommandKind,
        handler: CommandHandler,
        usage: str,
        help_text: str,
    ) -> None:
        self._handlers[kind] = handler
        self._help[kind] = (usage, help_text)

    def execute(self, command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
        handler = self._handlers.get(command.kind)
        if handler is None:
            # Parser and registry disagree; not reachable from user input.
            raise KeyError(f"No handler registered for {command.kind!r}")
        logger.debug("Executing %s", command.kind.value)
        return handler(command, tasks, store)

    def handle(self, state: AppState, line: str) -> Reply:
        """
        Handle one raw input line against the current state.
        Parse errors come back as the reply text.
        """
        parsed = parse(line, state.clock)
        if isinstance(parsed, UserError):
            logger.debug("Parse error for %r: %s", line, parsed.message)
            return Reply(parsed.message)
        return self.execute(parsed, state.tasks, state.store)

    def build_help(self) -> str:
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        lines = ["Here's what I understand:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage.ljust(width)}  {help_text}")
        lines.append("Dates: yyyy-MM-dd HHmm (e.g., 2026-02-15 2359) or HHmm for today.")
        lines.append("An event's /to time alone falls on the /from date.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- formatting helpers ----


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}. {t.display()}" for i, t in enumerate(tasks, start=1)]


def _task_from(command: Command) -> Task:
    assert command.description is not None
    if command.kind is CommandKind.DEADLINE:
        assert command.by is not None
        return Task.deadline(command.description, command.by)
    if command.kind is CommandKind.EVENT:
        assert command.start is not None and command.end is not None
        return Task.event(command.description, command.start, command.end)
    return Task.todo(command.description)


# ---- handlers ----


def cmd_bye(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    try:
        store.save(tasks)
    except StorageError as e:
        return Reply(f"{e}\n{BYE_MSG}", stop=True)
    return Reply(BYE_MSG, stop=True)


def cmd_list(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    if not tasks:
        return Reply(EMPTY_LIST_MSG)
    return Reply("\n".join(["Here are your tasks:", *_numbered(tasks)]))


def cmd_help(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    return Reply(registry.build_help())


def cmd_clear(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    if not tasks:
        return Reply(ALREADY_EMPTY_MSG)
    tasks.clear()
    return Reply(CLEARED_MSG)


def cmd_add(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    try:
        task = _task_from(command)
    except TaskValidationError as e:
        return Reply(str(e))

    dup = tasks.index_of_duplicate(task)
    if dup is not None:
        existing = tasks.get(dup)
        logger.debug("Duplicate of task %d rejected", dup)
        return Reply(
            f"Duplicate task found:\n  {existing.display()}",
            duplicate_index=dup,
            pending_task=task,
        )

    tasks.add(task)
    return Reply(f"Added: {task.display()}\nThere are now {tasks.size()} tasks in the list")


def cmd_mark(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    assert command.index is not None
    try:
        task = tasks.mark(command.index)
    except TaskIndexError:
        return Reply(INVALID_INDEX_MSG)
    return Reply(f"Nice! I've marked this task as done:\n  {task.display()}")


def cmd_unmark(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    assert command.index is not None
    try:
        task = tasks.unmark(command.index)
    except TaskIndexError:
        return Reply(INVALID_INDEX_MSG)
    return Reply(f"OK, I've marked this task as not done yet:\n  {task.display()}")


def cmd_delete(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    assert command.index is not None
    try:
        task = tasks.delete(command.index)
    except TaskIndexError:
        return Reply(INVALID_INDEX_MSG)
    return Reply(
        f"Noted. I've removed this task:\n  {task.display()}\n"
        f"Now you have {tasks.size()} tasks in the list."
    )


def cmd_find(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    assert command.keyword is not None
    matches = tasks.find(command.keyword)
    if not matches:
        return Reply(NO_MATCHES_MSG)
    return Reply("\n".join(["Here are the matching tasks in your list:", *_numbered(matches)]))


registry.register(CommandKind.TODO, cmd_add, "todo <task>", "Add a todo.")
registry.register(
    CommandKind.DEADLINE, cmd_add, "deadline <task> /by <date>", "Add a task due by a date/time."
)
registry.register(
    CommandKind.EVENT,
    cmd_add,
    "event <task> /from <date> /to <date>",
    "Add an event spanning a date/time range.",
)
registry.register(CommandKind.LIST, cmd_list, "list", "Show all tasks.")
registry.register(CommandKind.MARK, cmd_mark, "mark <number>", "Mark a task as done.")
registry.register(CommandKind.UNMARK, cmd_unmark, "unmark <number>", "Mark a task as not done.")
registry.register(CommandKind.DELETE, cmd_delete, "delete <number>", "Remove a task.")
registry.register(CommandKind.FIND, cmd_find, "find <keyword>", "Search descriptions (case-insensitive).")
registry.register(CommandKind.CLEAR, cmd_clear, "clear", "Remove all tasks.")
registry.register(CommandKind.HELP, cmd_help, "help", "Show this help.")
registry.register(CommandKind.BYE, cmd_bye, "bye", "Save and exit.")


# ---- public API ----


def execute(command: Command, tasks: TaskList, store: TaskRepo) -> Reply:
    return registry.execute(command, tasks, store)


def process_line(state: AppState, line: str) -> Reply:
    """Process one command line against the current state."""
    return registry.handle(state, line)


def replace_duplicate(state: AppState, reply: Reply) -> Reply:
    """
    Second half of the duplicate flow: put the rejected task in place of the
    existing one (same position). The host decides whether to call this.
    """
    if reply.duplicate_index is None or reply.pending_task is None:
        return Reply("Nothing to replace.")
    try:
        state.tasks.replace(reply.duplicate_index, reply.pending_task)
    except TaskIndexError:
        return Reply(INVALID_INDEX_MSG)
    return Reply(f"Replaced: {reply.pending_task.display()}")
