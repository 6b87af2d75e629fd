""" Tab completion of command names for the interactive prompt. """
import logging
import os

logger = logging.getLogger(__name__)


def executables_on_path(prefix, path=None):
    """ Names of executable files on the search path starting with prefix. """
    if path is None:
        path = os.environ.get("PATH", "")

    found = set()
    for directory in path.split(os.pathsep):
        if not os.path.isdir(directory):
            continue
        try:
            names = os.listdir(directory)
        except OSError:
            continue
        for name in names:
            if name.startswith(prefix) and os.access(os.path.join(directory, name), os.X_OK):
                found.add(name)
    return found


class Completer:
    """ readline completer offering builtin names and PATH executables. """

    def __init__(self, state, path=None):
        self.state = state
        self.path = path
        self.matches: list[str] = []

    def candidates(self, text: str) -> list[str]:
        names = {b for b in self.state.builtins if b.startswith(text)}
        names |= executables_on_path(text, self.path)
        return sorted(names)

    def complete(self, text: str, index: int) -> str | None:
        if index == 0:
            self.matches = self.candidates(text)
        if index < len(self.matches):
            return self.matches[index]
        return None


def install(completer: Completer) -> bool:
    """ Hook ``completer`` into readline; False if readline is missing. """
    try:
        import readline
    except ImportError:
        logger.debug("readline unavailable; tab completion disabled")
        return False

    readline.set_completer(completer.complete)
    readline.set_completer_delims(" ")
    if "libedit" in (readline.__doc__ or ""):
        readline.parse_and_bind("bind ^I rl_complete")
    else:
        readline.parse_and_bind("tab: complete")
    return True
