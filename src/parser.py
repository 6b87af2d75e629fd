""" Parse shell commands. """
import logging
from dataclasses import dataclass, field

from command import Command, Redirection, Stream
from exceptions import ParseError, RedirectionSyntaxError
from lexer import lex
from shell_state import ShellState

logger = logging.getLogger(__name__)

# operator -> (stream, append)
REDIRECT_OPERATORS = {
    ">": (Stream.STDOUT, False),
    "1>": (Stream.STDOUT, False),
    "&>": (Stream.BOTH, False),
    "2>": (Stream.STDERR, False),
    ">>": (Stream.STDOUT, True),
    "1>>": (Stream.STDOUT, True),
    "&>>": (Stream.BOTH, True),
    "2>>": (Stream.STDERR, True),
}


@dataclass(frozen=True)
class Empty:
    """ Blank input, or input whose every word expanded to nothing. """


@dataclass(frozen=True)
class NeedsMore:
    """ An open quote or trailing backslash; read another line. """


@dataclass(frozen=True)
class Ready:
    name: str
    args: list[str] = field(default_factory=list)


def parse_command(buffer: str, state: ShellState) -> Empty | NeedsMore | Ready:
    """
    Parse the accumulated input of one logical command.

    ``buffer`` is every line read so far joined with newlines. Words from
    single quotes (or holding an escaped '$' or backtick) are kept as
    typed; every other word has its $NAME references expanded, and words
    that expand to nothing are dropped.
    """
    if not buffer.strip():
        return Empty()

    tokens, lex_state = lex(buffer)
    if lex_state.incomplete:
        logger.debug("continuation needed: %r", lex_state)
        return NeedsMore()
    if not tokens:
        raise ParseError(f"failed parsing the command: {buffer!r}")

    words = []
    for tok in tokens:
        word = tok.value if tok.literal else state.expand(tok.value)
        if word:
            words.append(word)

    if not words:
        return Empty()
    return Ready(words[0], words[1:])


def split_redirection(words: list[str]) -> tuple[list[str], Redirection]:
    """
    Split off the first redirection clause in ``words``.

    Returns the words before the operator and the redirection it names.
    Anything after the target filename is discarded.
    """
    for i, word in enumerate(words):
        if word not in REDIRECT_OPERATORS:
            continue
        if i + 1 >= len(words):
            raise RedirectionSyntaxError(f"syntax error: expected filename after '{word}'")
        stream, append = REDIRECT_OPERATORS[word]
        return list(words[:i]), Redirection(words[i + 1], stream, append)

    return list(words), Redirection()


def build_command(ready: Ready) -> Command:
    """ Turn a parsed line into a Command with its redirection split off. """
    words, redirect = split_redirection([ready.name] + ready.args)
    if not words:
        raise RedirectionSyntaxError("syntax error: no command before redirection")
    return Command(words[0], words[1:], redirect)
