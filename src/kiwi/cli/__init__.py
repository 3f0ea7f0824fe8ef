"""
Command layer.

Components:
- parser.py: input line -> Command (or UserError)
- commands.py: CommandRegistry, executor and help text
- bootstrap.py: composition root (Settings -> AppState)
- main.py: process entry point
"""
