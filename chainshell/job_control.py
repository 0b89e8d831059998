from loguru import logger

from chainshell.builtin import BUILTIN_EXIT
from chainshell.config import NO_HANDLE
from chainshell.executor import dispatch
from chainshell.parser import Delimiter


def wait_for(handle, facility):
    """
    Block until `handle` terminates, using only facility.wait_any().

    Every other handle reaped in the meantime is discarded. When that handle
    belongs to a background job from an earlier line, its termination is
    gone for good: nothing will ever report it. wait_any() is shared by the
    whole session, so unrelated waits can consume each other's notifications.
    """
    if handle <= NO_HANDLE:
        return
    while True:
        try:
            done = facility.wait_any()
        except ChildProcessError:
            # no children left: handle was consumed by an earlier wait
            logger.debug("no children left while waiting for {}", handle)
            return
        if done == handle:
            return
        logger.debug("discarded termination of {} while waiting for {}", done, handle)


def run_chain(chain, facility, write):
    """
    Dispatch the commands of one line, honouring ';' and '&'.
    Returns: True if an exit command was reached (rest of the chain is dropped)
    """
    previous = NO_HANDLE
    waited = NO_HANDLE
    pending = Delimiter.NONE

    for cmd in chain.runnable():
        if previous not in (NO_HANDLE, waited) and pending is Delimiter.SEQUENTIAL:
            wait_for(previous, facility)
            waited = previous

        outcome, handle = dispatch(cmd.argv, facility, write)
        if outcome == BUILTIN_EXIT:
            return True

        # a failed dispatch keeps the last good handle
        if handle > NO_HANDLE:
            previous = handle
        pending = cmd.delimiter_after

    # already reaped handles are never waited on twice
    if previous in (NO_HANDLE, waited):
        return False
    if chain.background:
        logger.debug("{} left running in background", previous)
    else:
        wait_for(previous, facility)
    return False
