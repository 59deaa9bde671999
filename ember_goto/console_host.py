"""A terminal stand-in for the editor host, used by the CLI."""

import sys
from collections.abc import Sequence
from pathlib import Path

from ember_goto.models import PathCandidate
from ember_goto.navigate import ViewHint


class ConsoleHost:
    """Prints navigation requests and prompts for ambiguous choices."""

    def __init__(self, interactive: bool | None = None) -> None:
        """Prompt on ambiguity only when attached to a terminal, unless told."""
        self.interactive = sys.stdin.isatty() if interactive is None else interactive
        self.opened: list[tuple[str, ViewHint, int]] = []

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def visible_documents(self) -> Sequence[str]:
        return [path for path, _, _ in self.opened]

    def open(self, path: str, view_hint: ViewHint, line: int) -> None:
        self.opened.append((path, view_hint, line))
        print(f"{path}:{line + 1}")

    def pick(self, choices: Sequence[PathCandidate]) -> PathCandidate | None:
        for i, choice in enumerate(choices, start=1):
            print(f"{i:>3}. {choice.label}")
        if not self.interactive:
            return None
        answer = input("Open which file? [1-%d, empty to cancel] " % len(choices))
        if not answer.strip().isdigit():
            return None
        index = int(answer) - 1
        if 0 <= index < len(choices):
            return choices[index]
        return None

    def warn(self, message: str) -> None:
        print(message, file=sys.stderr)
