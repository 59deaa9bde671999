"""Classification of source files into script and template kinds."""

from enum import Enum
from pathlib import Path

SCRIPT_SUFFIXES = {".js", ".ts"}
TEMPLATE_SUFFIXES = {".hbs"}


class FileKind(Enum):
    """The two kinds of file a reference can be extracted from."""

    SCRIPT = "Script"
    TEMPLATE = "Template"


def file_kind_for(path: str | Path) -> FileKind | None:
    """Derive the file kind from the extension, or None if unsupported."""
    suffix = Path(path).suffix.lower()
    if suffix in SCRIPT_SUFFIXES:
        return FileKind.SCRIPT
    if suffix in TEMPLATE_SUFFIXES:
        return FileKind.TEMPLATE
    return None
