""" Execute a shell command. """
import contextlib
import logging
import sys

from command import Command, Redirection
from exceptions import ResolutionError
from executor import run_external
from resolver import resolve
from shell_state import ShellState

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def open_redirection(redirect: Redirection, stdout, stderr):
    """
    Yield the (out, err) pair a command should write to: the given
    streams, with the redirected one(s) replaced by the target file.
    The file is closed on exit.
    """
    if redirect.file is None:
        yield stdout, stderr
        return

    with open(redirect.file, redirect.mode, encoding="utf-8") as f:
        out = f if redirect.redirects_stdout else stdout
        err = f if redirect.redirects_stderr else stderr
        yield out, err


def execute_command(cmd: Command, shell_state: ShellState) -> int | None:
    """
    Run ``cmd`` and return its exit status.

    Returns None when the command could not be resolved, in which case
    the shell's last status is left as it was.
    """
    func = shell_state.builtins.get(cmd.name)

    path = None
    if func is None:
        try:
            path = resolve(cmd.name)
        except ResolutionError as e:
            logger.debug("resolution failed: %s", e)
            print(e, file=sys.stdout)
            return None

    # covers opening the target as well as writes and the flush on close
    try:
        with open_redirection(cmd.redirect, sys.stdout, sys.stderr) as (out, err):
            if func is not None:
                logger.debug("builtin %s args=%r redirect=%r", cmd.name, cmd.args, cmd.redirect)
                return func(cmd.args, shell_state, out, err) or 0

            # External commands: only hand real files to the child
            return run_external(
                path,
                [cmd.name] + cmd.args,
                stdout=out if cmd.redirect.redirects_stdout else None,
                stderr=err if cmd.redirect.redirects_stderr else None,
            )
    except OSError as e:
        target = cmd.redirect.file or cmd.name
        print(f"minish: {target}: {e.strerror or e}", file=sys.stderr)
        return 1
