""" Current state of the shell. """
import os

from constants import VAR_REF_RX
from shell_builtins import BUILTINS


class ShellState:
    """
    Per-session context handed to every dispatch: the builtin registry,
    the environment variables are looked up in, and the last exit status.
    """
    def __init__(self, builtins=None, environ=None):
        self.builtins = dict(BUILTINS if builtins is None else builtins)
        self.environ = os.environ if environ is None else environ
        self.last_status = 0

    def get_var(self, name):
        return self.environ.get(name, "")

    def set_status(self, status: int):
        self.last_status = int(status) if status is not None else 0

    def home(self) -> str:
        return self.environ.get("HOME") or os.path.expanduser("~")

    def expand(self, token: str) -> str:
        """ Replace each $NAME in token; a '$' not starting a name is kept. """
        return VAR_REF_RX.sub(lambda m: self.get_var(m.group(1)), token)
