"""CLI command implementations for the furnili application.

This package contains subcommands for the furnili CLI, including:
- calculate: Calculate a bill of materials
- rates: Show reference rate tables
"""

from furnili.cli.commands.calculate import calculate_command
from furnili.cli.commands.rates import rates_app

__all__ = ["calculate_command", "rates_app"]
