"""CLI command implementations for the renobudget application.

This package contains subcommands for the renobudget CLI, including:
- validate: Validate a room estimate configuration file
"""

from renobudget.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
