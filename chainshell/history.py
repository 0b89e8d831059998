import os
import sys

from chainshell.config import HISTORY_FILE, MAX_HISTORY

try:
    import readline
except ImportError:  # no line editing on this platform
    readline = None


def init_readline():
    """Enable emacs-style editing and history navigation on a real terminal."""
    if readline is None or not sys.stdin.isatty():
        return
    try:
        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def load_history(path=HISTORY_FILE):
    if readline is None:
        return
    try:
        if os.path.exists(path):
            readline.read_history_file(path)
    except Exception as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)


def save_history(path=HISTORY_FILE, limit=MAX_HISTORY):
    if readline is None:
        return
    try:
        readline.set_history_length(limit)
        readline.write_history_file(path)
    except Exception as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)


def read_line():
    """
    Read one raw line from stdin. The prompt is written by the caller.
    Raises EOFError at end of input.
    """
    return input()
