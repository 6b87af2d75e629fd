""" Registry of builtin commands. """
import os

from exceptions import ResolutionError, ShellExit
from resolver import resolve

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def expand_tilde(path, home):
    if path == "~" or path.startswith("~/"):
        return home + path[1:]
    return path


@builtin("cd")
def builtin_cd(args, state, out, err):
    if len(args) == 0:
        shown = target = state.home()
    else:
        shown = args[0]
        target = expand_tilde(args[0], state.home())

    try:
        os.chdir(target)
        return 0
    except FileNotFoundError:
        print(f"cd: {shown}: No such file or directory", file=err)
    except NotADirectoryError:
        print(f"cd: {shown}: Not a directory", file=err)
    except PermissionError:
        print(f"cd: {shown}: Permission denied", file=err)
    except OSError as e:
        print(f"cd: {shown}: {e.strerror or e}", file=err)
    return 1


@builtin("echo")
def builtin_echo(args, state, out, err) -> int:
    print(" ".join(args), file=out)
    return 0


@builtin("exit")
def builtin_exit(args, state, out, err):
    try:
        status = int(args[0]) if args else 0
    except ValueError:
        print(f"exit: {args[0]}: numeric argument required", file=err)
        status = 2
    raise ShellExit(status)


@builtin("pwd")
def builtin_pwd(args, state, out, err):
    try:
        print(os.getcwd(), file=out)
    except OSError as e:
        print(f"pwd: {e.strerror or e}", file=err)
        return 1
    return 0


@builtin("type")
def builtin_type(args, state, out, err):
    rc = 0
    for name in args:
        if name in state.builtins:
            print(f"{name} is a shell builtin", file=out)
            continue
        try:
            print(f"{name} is {resolve(name)}", file=out)
        except ResolutionError:
            print(f"{name}: not found", file=err)
            rc = 1
    return rc
