"""fountainview CLI commands."""

from __future__ import annotations

from fountainview.cli.commands.classify import classify_command
from fountainview.cli.commands.css import css_app
from fountainview.cli.commands.export import export_command
from fountainview.cli.commands.render import render_command
from fountainview.cli.commands.watch import watch_command

__all__ = [
    "classify_command",
    "css_app",
    "export_command",
    "render_command",
    "watch_command",
]
