""" Exceptions raised between the shell's components. """


class ShellExit(Exception):
    """ Raised by the exit builtin to stop the read loop. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ParseError(ValueError):
    """ Non-blank input that produced no words. """


class RedirectionSyntaxError(SyntaxError):
    """ A redirection operator with no target, or with no command. """


class ResolutionError(Exception):
    def __init__(self, name):
        super().__init__(name)
        self.name = name


class CommandNotFound(ResolutionError):
    def __str__(self):
        return f"{self.name}: command not found"


class CommandPermissionDenied(ResolutionError):
    def __str__(self):
        return f"{self.name}: permission denied"
