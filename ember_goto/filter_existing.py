"""Existence filtering of candidates and the zero/one/many policy."""

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ember_goto.models import PathCandidate
from ember_goto.outcomes import Ambiguous, NotFound, Outcome, Unique

logger = logging.getLogger(__name__)

ExistsPredicate = Callable[[str], bool]


def path_exists(path: str) -> bool:
    """Existence check against the local filesystem."""
    return Path(path).is_file()


def filter_existing(
    candidates: Iterable[PathCandidate],
    exists: ExistsPredicate = path_exists,
    max_workers: int = 1,
) -> list[PathCandidate]:
    """Keep the candidates that exist, in candidate order."""
    candidates = list(candidates)
    if max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # map() yields in submission order, not completion order
            present = list(executor.map(lambda c: exists(c.path), candidates))
    else:
        present = [exists(c.path) for c in candidates]

    existing = [c for c, ok in zip(candidates, present, strict=True) if ok]
    logger.debug("%d of %d candidates exist", len(existing), len(candidates))
    return existing


def disambiguate(
    existing: list[PathCandidate], namespace: str, module_path: str
) -> Outcome:
    """Turn the existing matches into a NotFound, Unique or Ambiguous outcome."""
    if not existing:
        logger.info("No file found for %s in namespace %r", module_path, namespace)
        return NotFound(namespace=namespace, module_path=module_path)
    if len(existing) == 1:
        return Unique(existing[0])
    return Ambiguous(tuple(existing))


def resolve_candidates(
    candidates: Iterable[PathCandidate],
    namespace: str,
    module_path: str,
    exists: ExistsPredicate = path_exists,
    max_workers: int = 1,
) -> Outcome:
    """Probe the candidates and apply the zero/one/many policy."""
    existing = filter_existing(candidates, exists, max_workers=max_workers)
    return disambiguate(existing, namespace, module_path)
