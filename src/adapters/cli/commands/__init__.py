"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.intro_commands import intros
from src.adapters.cli.commands.library_commands import libraries

__all__ = [
    "intros",
    "libraries",
]
