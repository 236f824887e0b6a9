import os
import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from core.rules import IndicatorPattern, RuleSet

logger = logging.getLogger(__name__)


def walk_directories(root: Path) -> Iterator[Path]:
    """
    Lazily yield ``root`` and every directory beneath it, top-down.

    Symlinks are not followed and enumeration errors are skipped, so the walk
    never aborts on a single bad directory. A directory that exists but cannot
    be listed is still yielded, only its children stay unknown.

    Args:
        root (Path): The directory to start from.

    Returns:
        Iterator[Path]: Absolute directory paths in visiting order.
    """
    unlisted: List[Path] = []

    def _skip(error: OSError):
        logger.debug(f"Skipping unreadable entry {error.filename}: {error.strerror}")
        if error.filename is not None and os.path.isdir(error.filename):
            unlisted.append(Path(error.filename))

    for dirpath, dirnames, _ in os.walk(root, onerror=_skip, followlinks=False):
        while unlisted:
            yield unlisted.pop(0)
        dirnames.sort()
        yield Path(dirpath)

    yield from unlisted


def is_project_root(directory: Path, patterns: Iterable[IndicatorPattern]) -> bool:
    """Return True once the first pattern matches one of the directory's direct children."""
    return any(pattern.matches(directory) for pattern in patterns)


def find_project_roots(root: Path, rule_set: RuleSet) -> Iterator[Path]:
    """
    Yield every directory under ``root`` (inclusive) that looks like a project
    root for ``rule_set``.

    Matching directories are still descended into, so nested projects are
    detected on their own.

    Args:
        root (Path): The directory to scan.
        rule_set (RuleSet): The ecosystem rules to classify with.

    Returns:
        Iterator[Path]: Matched project roots in traversal order.
    """
    for directory in walk_directories(root):
        if is_project_root(directory, rule_set.indicators):
            logger.debug(f"Found {rule_set.label} project at {directory}")
            yield directory
