"""Line-based terminal I/O over a rich console."""

from __future__ import annotations

from typing import TextIO

from rich.console import Console, RenderableType


class Terminal:
    """Prompts for raw text lines and prints styled messages.

    With ``stream`` set, input lines are read from it instead of stdin, which
    makes sessions scriptable. End of input raises EOFError either way.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or Console(highlight=False)
        self.stream = stream

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the trimmed line typed back."""
        line = self.console.input(f"{prompt} ", markup=False, stream=self.stream)
        if self.stream is not None and not line:
            raise EOFError("input stream closed")
        return line.strip()

    def say(self, message: str, style: str | None = None) -> None:
        self.console.print(message, style=style, markup=False, highlight=False)

    def success(self, message: str) -> None:
        self.say(message, style="green")

    def warn(self, message: str) -> None:
        self.say(message, style="yellow")

    def error(self, message: str) -> None:
        self.say(message, style="bold red")

    def show(self, renderable: RenderableType) -> None:
        self.console.print(renderable)
