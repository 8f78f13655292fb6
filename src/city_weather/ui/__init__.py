"""
UI layer for City Weather application.

This package contains the interactive Rich UI and the Typer CLI.
"""

from .rich_ui import RichUI
from .typer_cli import TyperCLI

__all__ = ['RichUI', 'TyperCLI']
