"""Value types shared by the resolution pipeline."""

from dataclasses import dataclass

from ember_goto.file_kind import FileKind


@dataclass(frozen=True)
class SourceLocation:
    """A cursor position inside a source file."""

    file_path: str
    line_text: str
    cursor_column: int


@dataclass(frozen=True)
class Reference:
    """The token extracted under the cursor."""

    raw_text: str
    is_namespace_qualified: bool
    file_kind: FileKind


@dataclass(frozen=True)
class ResolvedModuleName:
    """A reference mapped onto an addon namespace and a module-local path."""

    namespace: str
    module_path: str  # namespace-stripped, "/"-joined
    implied_kind: FileKind
    context_namespace: str = ""  # namespace of the requesting file itself


@dataclass(frozen=True)
class PathCandidate:
    """A hypothesized absolute path plus its pick-list label."""

    path: str
    label: str  # e.g. "JavaScript: lib/ui/addon/components/foo.js"


@dataclass(frozen=True)
class RelatedFile:
    """One entry of a related-file set."""

    label: str
    relative_path: str
    candidate: PathCandidate | None  # None when nothing exists on disk

    @property
    def found(self) -> bool:
        """Whether the related file exists."""
        return self.candidate is not None
