from collections import deque

import pytest


class FakeFacility:
    """
    Scripted execution facility.

    spawn() hands out handles 100, 101, ... and records ("spawn", name).
    wait_any() reaps handles in `reap_order` first, then the oldest
    outstanding one, and records ("reap", handle).
    """

    def __init__(self, reap_order=(), fail=()):
        self.events = []
        self.outstanding = []
        self.reap_order = deque(reap_order)
        self.fail = dict.fromkeys(fail)
        self.next_handle = 100

    def spawn(self, argv):
        name = argv[0]
        if name in self.fail:
            self.events.append(("fail", name))
            return -1
        handle = self.next_handle
        self.next_handle += 1
        self.outstanding.append(handle)
        self.events.append(("spawn", name))
        return handle

    def wait_any(self):
        if self.reap_order:
            handle = self.reap_order.popleft()
        elif self.outstanding:
            handle = self.outstanding[0]
        else:
            raise ChildProcessError("no children")
        self.outstanding.remove(handle)
        self.events.append(("reap", handle))
        return handle


class Output:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


@pytest.fixture
def facility() -> FakeFacility:
    return FakeFacility()


@pytest.fixture
def output() -> Output:
    return Output()
