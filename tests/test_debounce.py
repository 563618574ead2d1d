"""Tests for the trailing-edge Debouncer."""

import threading
import time

from tender_search.debounce import Debouncer


class Counter:
    def __init__(self):
        self.count = 0
        self.fired = threading.Event()

    def __call__(self):
        self.count += 1
        self.fired.set()


def test_burst_runs_action_once():
    counter = Counter()
    debouncer = Debouncer(counter, delay=0.05)
    for _ in range(5):
        debouncer.trigger()
    assert counter.fired.wait(2.0)
    time.sleep(0.15)
    assert counter.count == 1
    assert not debouncer.pending


def test_trigger_resets_the_delay():
    """The action runs *delay* after the last trigger, not the first."""
    counter = Counter()
    debouncer = Debouncer(counter, delay=0.4)
    debouncer.trigger()
    time.sleep(0.2)
    debouncer.trigger()
    time.sleep(0.25)
    assert counter.count == 0
    assert counter.fired.wait(2.0)
    assert counter.count == 1


def test_cancel_drops_pending_action():
    counter = Counter()
    debouncer = Debouncer(counter, delay=0.05)
    debouncer.trigger()
    assert debouncer.pending
    debouncer.cancel()
    assert not debouncer.pending
    time.sleep(0.15)
    assert counter.count == 0


def test_separate_bursts_each_fire():
    counter = Counter()
    debouncer = Debouncer(counter, delay=0.02)
    debouncer.trigger()
    assert counter.fired.wait(2.0)
    counter.fired.clear()
    debouncer.trigger()
    assert counter.fired.wait(2.0)
    assert counter.count == 2


def test_superseded_token_does_not_fire():
    """A timer whose thread already woke up but was superseded stays silent."""
    counter = Counter()
    debouncer = Debouncer(counter, delay=10)
    debouncer.trigger()
    stale_token = debouncer._token
    debouncer.trigger()
    debouncer._fire(stale_token)
    assert counter.count == 0
    debouncer.cancel()
