import os
import subprocess

from loguru import logger

from chainshell.builtin import BUILTIN_EXIT, EXTERNAL, classify
from chainshell.config import DISPATCH_FAILED, NO_HANDLE


class ProcessFacility:
    """
    Runs commands as child processes of the interpreter.
    A handle is the child's pid; wait_any() reaps whichever child ends first.
    """

    def __init__(self):
        # pid -> Popen. Holding the object keeps subprocess from polling
        # (and reaping) the child behind our back.
        self.children = {}

    def spawn(self, argv):
        proc = subprocess.Popen(argv)
        self.children[proc.pid] = proc
        logger.debug("spawned {} as {}", argv[0], proc.pid)
        return proc.pid

    def wait_any(self):
        """Block until any child terminates. Returns its pid."""
        pid, status = os.wait()
        proc = self.children.pop(pid, None)
        if proc is not None:
            proc.returncode = os.waitstatus_to_exitcode(status)
            logger.debug("reaped {} (exit {})", pid, proc.returncode)
        return pid

    def outstanding(self):
        return sorted(self.children)


def dispatch(argv, facility, write):
    """
    Echo the program name, then run argv unless it is the exit builtin.
    Returns: (outcome, handle). handle is DISPATCH_FAILED when nothing started.
    """
    name = argv[0]
    write(f"{name}\n")

    if classify(argv) == BUILTIN_EXIT:
        return BUILTIN_EXIT, NO_HANDLE

    try:
        handle = facility.spawn(argv)
    except FileNotFoundError:
        write(f"chainshell: command not found: {name}\n")
        return EXTERNAL, DISPATCH_FAILED
    except PermissionError:
        write(f"chainshell: permission denied: {name}\n")
        return EXTERNAL, DISPATCH_FAILED
    except Exception as e:
        write(f"chainshell: failed to execute '{name}': {e}\n")
        return EXTERNAL, DISPATCH_FAILED

    if handle is None or handle <= 0:
        write(f"chainshell: failed to execute '{name}'\n")
        return EXTERNAL, DISPATCH_FAILED
    return EXTERNAL, handle
