"""
Core building blocks shared by the parser, executor and hosts.

Components:
- ports.py: Protocols the core depends on (Clock, TaskRepo)
- clock.py: system and fixed clocks
- errors.py: exception hierarchy + UserError value
- state.py: AppState and the Reply value returned by the executor
"""
