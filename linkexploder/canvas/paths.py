"""Find a free output path for a new canvas."""

import logging
from collections.abc import Callable

from ..errors import NoAvailablePathError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 50


def suffixed_path(path: str, n: int) -> str:
    """Insert `-n` before the extension of the last path component."""
    folder, slash, filename = path.rpartition("/")
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem:
        return f"{path}-{n}"
    return f"{folder}{slash}{stem}-{n}.{ext}"


def allocate_path(path: str, exists: Callable[[str], bool], attempts: int = MAX_ATTEMPTS) -> str:
    """Return `path` if free, else the first free `name-N.ext` for N < attempts.

    Raises NoAvailablePathError when every candidate is taken. The check is
    optimistic: nothing stops another writer from taking the path before the
    caller creates it.
    """
    if not exists(path):
        return path

    for n in range(attempts):
        candidate = suffixed_path(path, n)
        logger.debug("trying %s", candidate)
        if not exists(candidate):
            return candidate

    logger.warning("no paths available for %s", path)
    raise NoAvailablePathError(path, attempts)
