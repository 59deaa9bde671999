"""Handing an outcome back to the editor host."""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Protocol

from ember_goto.locate_export import locate_export
from ember_goto.models import PathCandidate
from ember_goto.outcomes import Ambiguous, NotFound, Outcome, Unique

logger = logging.getLogger(__name__)


class ViewHint(Enum):
    """Where a document should be shown."""

    EXISTING = "existing"  # the view already showing the document
    BESIDE = "beside"


class Host(Protocol):
    """Capabilities the editor provides."""

    def read_text(self, path: str) -> str: ...

    def visible_documents(self) -> Sequence[str]: ...

    def open(self, path: str, view_hint: ViewHint, line: int) -> None: ...

    def pick(self, choices: Sequence[PathCandidate]) -> PathCandidate | None: ...

    def warn(self, message: str) -> None: ...


def open_match(host: Host, match: PathCandidate, symbol: str | None = None) -> None:
    """Open a match, reusing a view that already shows it."""
    try:
        line = locate_export(host.read_text(match.path), symbol)
    except (OSError, UnicodeDecodeError):
        logger.debug("Could not read %s, opening at the top", match.path)
        line = 0
    if match.path in host.visible_documents():
        view_hint = ViewHint.EXISTING
    else:
        view_hint = ViewHint.BESIDE
    host.open(match.path, view_hint, line)


def navigate(
    outcome: Outcome, host: Host, symbol: str | None = None
) -> PathCandidate | None:
    """Act on an outcome; returns the opened match, if any."""
    if isinstance(outcome, NotFound):
        host.warn(outcome.message)
        return None
    if isinstance(outcome, Unique):
        open_match(host, outcome.match, symbol)
        return outcome.match
    if isinstance(outcome, Ambiguous):
        choice = host.pick(outcome.matches)
        if choice is None:
            return None
        open_match(host, choice, symbol)
        return choice
    # NoReference and Deferred are silent
    return None
