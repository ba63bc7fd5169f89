"""Output formatting for httpstat CLI."""

import json
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.markup import escape


@dataclass
class OutputContext:
    """Context for output formatting.

    Reports go to ``console`` (stdout); errors go to ``err_console``.
    """

    console: Console
    err_console: Console = field(default_factory=lambda: Console(stderr=True))
    json_mode: bool = False

    def write(self, text: str) -> None:
        """Write text to stdout exactly as given.

        Bypasses rich rendering, which would expand tabs, interpret markup
        and wrap long lines.
        """
        if not self.json_mode:
            self.console.file.write(text + "\n")

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error to stderr, as JSON in json mode."""
        if self.json_mode:
            payload = {"error": message, **(data or {})}
            self.err_console.out(json.dumps(payload, default=str), highlight=False)
        else:
            self.err_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print success message in appropriate format."""
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{escape(message)}[/green]", soft_wrap=True)
