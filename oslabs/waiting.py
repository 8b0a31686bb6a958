"""Waiting for child processes: blocking, polling, and observing zombies."""

import errno
import os
import sys
import time
from typing import Tuple

from oslabs.procstate import process_state

POLL_INTERVAL = 1.0


def _spawn_sleeper(delay: float, exit_code: int) -> int:
    sys.stdout.flush()
    pid = os.fork()
    if pid == 0:
        try:
            time.sleep(delay)
        finally:
            os._exit(exit_code)
    return pid


def _exit_status(status: int) -> int:
    if not os.WIFEXITED(status):
        raise ChildProcessError(errno.ECHILD, "child did not exit normally")
    return os.WEXITSTATUS(status)


def wait_example(delay: float = 2) -> Tuple[int, int]:
    """Fork a child that exits with status 4 after ``delay`` seconds and block on it.

    Returns ``(pid, exit_status)``.
    """
    _spawn_sleeper(delay, 4)
    print("Calling wait", flush=True)
    wait_pid, status = os.wait()
    code = _exit_status(status)
    print(f"Wait returned for an exited process! pid: {wait_pid}, status: {code}")
    return wait_pid, code


def wait_poll_example(delay: float = 2) -> Tuple[int, int, int]:
    """Fork a child that exits after ``delay`` seconds and poll until it is gone.

    Returns ``(pid, exit_status, attempts)``.
    """
    pid = _spawn_sleeper(delay, 0)
    wait_pid, status, count = 0, 0, 0
    while wait_pid == 0:
        time.sleep(POLL_INTERVAL)
        count += 1
        print(f"Calling wait (attempt {count})", flush=True)
        wait_pid, status = os.waitpid(pid, os.WNOHANG)
    code = _exit_status(status)
    print(f"Wait returned for an exited process! pid: {wait_pid}, status: {code}")
    return wait_pid, code, count


def zombie_example(delay: float = 1) -> Tuple[str, str]:
    """Show a child's state while it sleeps and again after it exits unreaped.

    The child sleeps ``2 * delay`` seconds; the parent looks after ``delay``
    and again after a further ``2 * delay``. The child is reaped afterwards.
    Returns both observed states.
    """
    pid = _spawn_sleeper(2 * delay, 0)
    try:
        time.sleep(delay)
        first = process_state(pid)
        print(f"Child process state: {first}", flush=True)
        time.sleep(2 * delay)
        second = process_state(pid)
        print(f"Child process state: {second}", flush=True)
    finally:
        os.waitpid(pid, 0)
    return first, second