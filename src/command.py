""" Command to be executed. """
from dataclasses import dataclass
from enum import IntEnum


class Stream(IntEnum):
    STDOUT = 1
    STDERR = 2
    BOTH = 3


@dataclass
class Redirection:
    """ Where a command's output goes; ``file`` is None for no redirection. """
    file: str | None = None
    stream: Stream = Stream.STDOUT
    append: bool = False

    @property
    def mode(self) -> str:
        return "a" if self.append else "w"

    @property
    def redirects_stdout(self) -> bool:
        return self.file is not None and self.stream in (Stream.STDOUT, Stream.BOTH)

    @property
    def redirects_stderr(self) -> bool:
        return self.file is not None and self.stream in (Stream.STDERR, Stream.BOTH)


class Command:
    """ A parsed command. """
    def __init__(self, name, args, redirect=None):
        self.name = name
        self.args = args
        self.redirect = redirect if redirect is not None else Redirection()

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r}, {self.redirect!r})"
