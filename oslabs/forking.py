"""Create a child process, and replace the current process with another program."""

import os
import sys
from typing import Tuple

LS_PATH = "/usr/bin/ls"


def fork_example() -> Tuple[int, int]:
    """Fork; each side reports its ids and its own copy of ``x``.

    The child exits after reporting. The parent waits for it and returns
    ``(child_pid, x)``.
    """
    x = 5
    sys.stdout.flush()
    returned_pid = os.fork()

    if returned_pid == 0:
        try:
            x = 6
            print(f"Child returned pid: {returned_pid}")
            print(f"Child pid: {os.getpid()}")
            print(f"Child parent pid: {os.getppid()}")
            print(f"x = {x}")
            sys.stdout.flush()
        finally:
            os._exit(0)

    x = 3
    print(f"Parent returned pid: {returned_pid}")
    print(f"Parent pid: {os.getpid()}")
    print(f"Parent parent pid: {os.getppid()}")
    print(f"x = {x}", flush=True)
    os.waitpid(returned_pid, 0)
    return returned_pid, x


def execve_example() -> int:
    """Replace this process with ``ls -a``; returns an errno only if that fails."""
    print("I'm going to become another process", flush=True)
    try:
        os.execve(LS_PATH, ["ls", "-a"], {})
    except OSError as exc:
        print(f"execve failed: {exc.strerror or exc}", file=sys.stderr, flush=True)
        return exc.errno or 1
    print("If execve worked, this will never print")
    return 0