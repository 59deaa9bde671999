"""Go-to-definition: from a cursor position to the files it refers to."""

import logging
from pathlib import Path

from ember_goto.bind_import import bind_import
from ember_goto.extract_reference import extract_reference
from ember_goto.file_kind import FileKind, file_kind_for
from ember_goto.filter_existing import ExistsPredicate, path_exists, resolve_candidates
from ember_goto.generate_candidates import generate_candidates
from ember_goto.jsconfig_paths import is_mapped_by_jsconfig
from ember_goto.models import SourceLocation
from ember_goto.outcomes import Deferred, NoReference, Outcome
from ember_goto.resolve_namespace import resolve_namespace
from ember_goto.root_configuration import RootConfiguration

logger = logging.getLogger(__name__)

RELATIVE_IMPORT = "relative import"
JSCONFIG_MAPPING = "jsconfig path mapping"


def project_relative(file_path: str, project_root: str) -> str:
    """Express a file path relative to the project root when it lies inside it."""
    path = Path(file_path)
    if not path.is_absolute():
        return path.as_posix()
    try:
        return path.relative_to(project_root).as_posix()
    except ValueError:
        return path.as_posix()


def resolve_definition(
    location: SourceLocation,
    source_text: str,
    config: RootConfiguration,
    exists: ExistsPredicate = path_exists,
    max_workers: int = 1,
) -> Outcome:
    """Resolve the reference under the cursor to existing files."""
    file_kind = file_kind_for(location.file_path)
    if file_kind is None:
        return NoReference()

    reference = extract_reference(location.line_text, location.cursor_column, file_kind)
    if reference is None:
        return NoReference()

    specifier = reference.raw_text
    if file_kind is FileKind.SCRIPT:
        specifier = bind_import(source_text, reference.raw_text)
        if specifier.startswith("."):
            logger.info("Leaving relative import %r to the editor", specifier)
            return Deferred(RELATIVE_IMPORT)

    current_file = project_relative(location.file_path, config.project_root)
    resolved = resolve_namespace(specifier, current_file, file_kind, config)

    if file_kind is FileKind.SCRIPT and is_mapped_by_jsconfig(
        config.project_root, resolved.namespace
    ):
        logger.info("jsconfig.json already maps %r", resolved.namespace)
        return Deferred(JSCONFIG_MAPPING)

    candidates = generate_candidates(config, resolved)
    return resolve_candidates(
        candidates,
        resolved.namespace,
        resolved.module_path,
        exists,
        max_workers=max_workers,
    )
