"""CLI command implementations for the wardrobes application.

This package contains subcommands for the wardrobes CLI, including:
- validate-state: Validate a layout state document
"""

from wardrobes.cli.commands.validate import validate_state_command

__all__ = ["validate_state_command"]
