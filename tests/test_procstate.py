import os
import subprocess
import sys
import time

import pytest

from oslabs.procstate import process_state


def _wait_for_state(pid, wanted, timeout=5.0):
    deadline = time.monotonic() + timeout
    state = process_state(pid)
    while state != wanted and time.monotonic() < deadline:
        time.sleep(0.01)
        state = process_state(pid)
    return state


def test_own_process_is_running():
    assert process_state(os.getpid()) == "R"


def test_sleeping_child_reports_sleeping():
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(30)"])
    try:
        assert _wait_for_state(proc.pid, "S") == "S"
    finally:
        proc.kill()
        proc.wait()


def test_unreaped_child_is_zombie():
    proc = subprocess.Popen([sys.executable, "-c", "pass"])
    try:
        assert _wait_for_state(proc.pid, "Z") == "Z"
    finally:
        proc.wait()


def test_missing_process_raises():
    proc = subprocess.Popen([sys.executable, "-c", "pass"])
    proc.wait()
    with pytest.raises(ProcessLookupError):
        process_state(proc.pid)


def test_result_is_single_character():
    assert len(process_state(os.getpid())) == 1