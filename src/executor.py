""" Launch external programs. """
import contextlib
import logging
import signal
import subprocess
import sys

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def forward_interrupt(proc: subprocess.Popen):
    """
    While active, SIGINT terminates ``proc`` instead of interrupting the
    shell. The previous handler is restored on exit.
    """
    def on_interrupt(signum, frame):
        logger.debug("interrupt: terminating pid %d", proc.pid)
        proc.terminate()

    try:
        previous = signal.signal(signal.SIGINT, on_interrupt)
    except ValueError:
        # signal handlers can only be installed from the main thread
        yield
        return

    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def exit_status(returncode: int) -> int:
    """ Map a child's return code to the shell's exit status. """
    if returncode >= 0:
        return returncode
    # killed by a signal
    return 1


def run_external(path: str, argv: list[str], stdout=None, stderr=None) -> int:
    """
    Run ``path`` with ``argv`` (argv[0] is the name the user typed) and
    wait for it. stdin is inherited; stdout/stderr are inherited unless
    an open file is given.
    """
    logger.debug("spawning %s argv=%r", path, argv)
    # anything the shell printed must land before the child's output
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        proc = subprocess.Popen(argv, executable=path, stdout=stdout, stderr=stderr)
    except OSError as e:
        print(f"{argv[0]}: {e.strerror or e}", file=sys.stderr)
        return 1

    with forward_interrupt(proc):
        returncode = proc.wait()

    logger.debug("%s exited with %d", argv[0], returncode)
    return exit_status(returncode)
