import io
import json

import pytest
from rich.console import Console

from foodcourt.actions import Session
from foodcourt.persistence import RecordStore
from foodcourt.terminal import Terminal

SECURITY_CODE = 4321


class FixedCode:
    """Stands in for random.Random, always drawing the same code."""

    def __init__(self, code=SECURITY_CODE):
        self.code = code
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.code


def scripted_terminal(lines):
    console = Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False, highlight=False)
    stream = io.StringIO("".join(f"{line}\n" for line in lines))
    return Terminal(console=console, stream=stream)


def output_of(session_or_terminal):
    terminal = getattr(session_or_terminal, "terminal", session_or_terminal)
    return terminal.console.file.getvalue()


def write_collection(store, collection, rows):
    path = store.path_for(collection)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(rows, indent=2), encoding="utf-8")


def read_collection(store, collection):
    return json.loads(store.path_for(collection).read_text(encoding="utf-8"))


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path / "data")


@pytest.fixture
def make_session(store):
    def _make(*lines, code=SECURITY_CODE):
        return Session(store=store, terminal=scripted_terminal(lines), rng=FixedCode(code))

    return _make
