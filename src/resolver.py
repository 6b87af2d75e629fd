""" Find the executable a command name refers to. """
import logging
import os

from exceptions import CommandNotFound, CommandPermissionDenied

logger = logging.getLogger(__name__)


def candidate_paths(name, path=None):
    """ Every location ``name`` could live at, in search order. """
    if os.sep in name:
        return [name]
    if path is None:
        path = os.environ.get("PATH", os.defpath)
    # an empty PATH entry means the current directory
    return [os.path.join(d or os.curdir, name) for d in path.split(os.pathsep)]


def resolve(name: str, path: str | None = None) -> str:
    """
    Return the first executable regular file for ``name``.

    Raises CommandPermissionDenied when matching files exist but none is
    executable, CommandNotFound when there is no match at all.
    """
    if not name:
        raise CommandNotFound(name)

    denied = False
    for candidate in candidate_paths(name, path):
        if not os.path.isfile(candidate):
            continue
        if os.access(candidate, os.X_OK):
            logger.debug("resolved %s -> %s", name, candidate)
            return candidate
        denied = True

    if denied:
        raise CommandPermissionDenied(name)
    raise CommandNotFound(name)
