import sys

from loguru import logger

from chainshell.config import PROMPT_TEMPLATE
from chainshell.history import read_line
from chainshell.job_control import run_chain
from chainshell.parser import parse_line


def write_output(text):
    """Unbuffered output sink for prompts, echoes and errors."""
    sys.stdout.write(text)
    sys.stdout.flush()


class Session:
    """
    One interpreter session: prompt, read, parse, run, repeat until exit.

    read_line   -- returns one raw line, raises EOFError at end of input
    facility    -- execution facility (spawn / wait_any)
    write       -- output sink
    on_terminate -- termination primitive, called once when the session ends;
                    it may raise to end the process
    """

    def __init__(self, facility, read_line=read_line, write=write_output, on_terminate=None):
        self.facility = facility
        self.read_line = read_line
        self.write = write
        self.on_terminate = on_terminate
        self.prompt_counter = 1
        self.terminated = False

    def prompt(self):
        return PROMPT_TEMPLATE.format(count=self.prompt_counter)

    def terminate(self):
        if self.terminated:
            return
        self.terminated = True
        logger.debug("session terminated at prompt {}", self.prompt_counter)
        if self.on_terminate is not None:
            self.on_terminate()

    def process_line(self, line):
        """Run one raw line. Returns True if it asked to exit."""
        chain = parse_line(line)
        if not chain.runnable():
            return False
        return run_chain(chain, self.facility, self.write)

    def step(self):
        """One prompt cycle."""
        self.write(self.prompt())
        try:
            line = self.read_line()
        except EOFError:
            self.write("\n")
            self.terminate()
            return
        except KeyboardInterrupt:
            self.write("\n")
            return

        try:
            if self.process_line(line):
                self.terminate()
                return
        except KeyboardInterrupt:
            # rest of the chain is abandoned
            self.write("\n")

        if line.strip():
            self.prompt_counter += 1

    def run(self):
        while not self.terminated:
            self.step()
