"""
Kiwi: a personal task tracker driven by a line-oriented command language.

Subpackages:
- core: ports, state, errors, clock
- tasks: task model, datetime codec, task list, file-backed store
- cli: command parser, command registry/executor, bootstrap, entry point
- connectors: interactive hosts (console)
"""

__version__ = "0.1.0"
