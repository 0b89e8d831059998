from dataclasses import dataclass, field
from enum import Enum


class Delimiter(Enum):
    NONE = None
    SEQUENTIAL = ";"
    CONCURRENT = "&"


_DELIMITERS = {d.value: d for d in (Delimiter.SEQUENTIAL, Delimiter.CONCURRENT)}


@dataclass
class ParsedCommand:
    argv: list = field(default_factory=list)
    delimiter_after: Delimiter = Delimiter.NONE

    def __bool__(self):
        return bool(self.argv)


@dataclass
class Chain:
    """All commands parsed from one input line, in order."""
    commands: list = field(default_factory=list)

    def __iter__(self):
        return iter(self.commands)

    def __len__(self):
        return len(self.commands)

    @property
    def background(self):
        """True when the line ended with a trailing '&'."""
        return bool(self.commands) and self.commands[-1].delimiter_after is Delimiter.CONCURRENT

    def runnable(self):
        return [cmd for cmd in self.commands if cmd]


def tokenize(line):
    """
    Split a raw line into whitespace separated tokens.
    No quoting or escaping: 'echo "a b"' gives ['echo', '"a', 'b"'].
    """
    return line.split()


def parse_chain(tokens):
    """
    Group tokens into commands separated by ';' and '&'.
    Returns: Chain
    """
    chain, cur = Chain(), []
    for tok in tokens:
        delim = _DELIMITERS.get(tok)
        if delim is None:
            cur.append(tok)
            continue
        # empty segments are kept here and skipped at dispatch
        chain.commands.append(ParsedCommand(cur, delim))
        cur = []
    if cur:
        chain.commands.append(ParsedCommand(cur, Delimiter.NONE))
    return chain


def parse_line(line):
    return parse_chain(tokenize(line))
