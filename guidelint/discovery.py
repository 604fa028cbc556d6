"""
discovery.py — Expand command-line paths into the files to lint.

Directories are walked recursively; a directory is skipped when its name or
its path relative to the walk root matches an exclusion pattern. Files named
explicitly are always linted if guidelint knows their kind.
"""

import logging
import os
from fnmatch import fnmatch

from guidelint.errors import DiscoveryError
from guidelint.source import detect_kind

logger = logging.getLogger(__name__)


def is_excluded(name: str, relpath: str, patterns: list[str]) -> bool:
    relpath = relpath.replace(os.sep, '/')
    return any(fnmatch(name, p) or fnmatch(relpath, p) for p in patterns)


def _walk(root: str, patterns: list[str]):
    for dirpath, dirnames, filenames in os.walk(root):
        # prune in place so os.walk never descends into excluded directories
        dirnames[:] = sorted(
            d for d in dirnames
            if not is_excluded(d, os.path.relpath(os.path.join(dirpath, d), root), patterns)
        )
        for filename in sorted(filenames):
            path = os.path.join(dirpath, filename)
            if is_excluded(filename, os.path.relpath(path, root), patterns):
                continue
            if detect_kind(path):
                yield path


def discover(paths: list[str], config) -> list[str]:
    """Return the sorted, de-duplicated files to lint under paths."""
    patterns = config.exclude_patterns
    found: dict[str, None] = {}

    for path in paths:
        if os.path.isdir(path):
            for file_path in _walk(path, patterns):
                found.setdefault(os.path.normpath(file_path), None)
        elif os.path.isfile(path):
            if detect_kind(path):
                found.setdefault(os.path.normpath(path), None)
            else:
                logger.warning('Skipping %s: not a Python or requirements file', path)
        else:
            raise DiscoveryError(path)

    files = sorted(found)
    logger.debug('Discovered %d file(s) under %s', len(files), ', '.join(paths))
    return files
