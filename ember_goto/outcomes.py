"""Results a resolution request can end in."""

from dataclasses import dataclass

from ember_goto.models import PathCandidate


@dataclass(frozen=True)
class NoReference:
    """Nothing resolvable under the cursor; a silent no-op."""


@dataclass(frozen=True)
class Deferred:
    """Left to the host's own resolution (relative import, jsconfig mapping)."""

    reason: str


@dataclass(frozen=True)
class NotFound:
    """No candidate exists on disk."""

    namespace: str
    module_path: str

    @property
    def message(self) -> str:
        """Warning text naming what was searched for."""
        if not self.namespace:
            return f"Sorry, could not find {self.module_path}"
        return f"Sorry, could not find {self.module_path} in {self.namespace}"


@dataclass(frozen=True)
class Unique:
    """Exactly one candidate exists."""

    match: PathCandidate


@dataclass(frozen=True)
class Ambiguous:
    """Several candidates exist, in search order."""

    matches: tuple[PathCandidate, ...]


Outcome = NoReference | Deferred | NotFound | Unique | Ambiguous
