""" Implement the core of the shell. """
import logging
import sys

from constants import CONTINUATION_PROMPT, PROMPT
from exceptions import ParseError, RedirectionSyntaxError, ShellExit
from parser import NeedsMore, Ready, build_command, parse_command
from runner import execute_command
from shell_state import ShellState

logger = logging.getLogger(__name__)


def read_command(state: ShellState, prompt=PROMPT):
    """
    Read lines until they form a complete logical command.

    Lines are joined with newlines and re-parsed as a whole after each
    read, so an open quote keeps its newline and a trailing backslash
    joins the next line. Returns an Empty or Ready outcome.
    """
    lines = []
    while True:
        lines.append(input(prompt))
        outcome = parse_command("\n".join(lines), state)
        if not isinstance(outcome, NeedsMore):
            return outcome
        prompt = CONTINUATION_PROMPT


class Shell:
    def __init__(self, state=None, prompt=PROMPT):
        self.state = state if state is not None else ShellState()
        self.prompt = prompt

    def execute(self, ready: Ready) -> int:
        """ Dispatch one parsed line and record its status. """
        try:
            cmd = build_command(ready)
        except RedirectionSyntaxError as e:
            print(e.msg, file=sys.stderr)
            return self.state.last_status

        status = execute_command(cmd, self.state)
        if status is not None:
            self.state.set_status(status)
        return self.state.last_status

    def run_line(self, line: str) -> int:
        """ Run a single complete line, e.g. from ``-c``. """
        try:
            outcome = parse_command(line, self.state)
            if isinstance(outcome, NeedsMore):
                raise ParseError("unexpected end of input")
            if isinstance(outcome, Ready):
                self.execute(outcome)
        except ShellExit as e:
            return e.status
        except ParseError as e:
            print(f"minish: {e}", file=sys.stderr)
            return 2
        return self.state.last_status

    def run(self):
        while True:
            try:
                outcome = read_command(self.state, self.prompt)
                if isinstance(outcome, Ready):
                    self.execute(outcome)
            except ShellExit as e:
                return e.status

            except EOFError:
                print("exit")
                return 0

            except KeyboardInterrupt:
                # drop whatever was pending, start a fresh prompt
                print()

            except ParseError as e:
                print(f"minish: {e}", file=sys.stderr)
