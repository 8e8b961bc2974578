"""CLI command implementations for the perimeters application.

This package contains subcommands for the perimeters CLI, including:
- validate: Validate a configuration file
"""

from perimeters.cli.commands.validate import validate_command

__all__ = ["validate_command"]
