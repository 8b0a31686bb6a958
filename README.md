# oslabs

Short, runnable demonstrations of how processes behave on a POSIX system:
creating them, replacing them, waiting for them, reading their state and
copying data from a file or standard input to standard output while signals
arrive.

Everything except `Point` needs a POSIX system. `process_state`, and so
`zombie_example`, read `/proc` and therefore need Linux.

## Install

```
pip install .
```

## Commands

Copy a file (or standard input when no file is given) to standard output:

```
oslabs-cat notes.txt
echo hello | oslabs-cat
```

More than one argument is refused with `EINVAL` as the exit status. If the
file cannot be opened, `open: <reason>` is printed to standard error and the
exit status is the error number.

The same copy, but while it runs `SIGINT` and `SIGTERM` are caught: each one
prints `Ignoring signal <number>` and the copy carries on. The previous
handlers are put back when the copy finishes.

```
oslabs-signal-cat notes.txt
```

Print the coordinates of a point built from 1 and 2:

```
oslabs-point
```

## Library use

```python
import os

from oslabs.procstate import process_state
from oslabs.streams import copy_stream
from oslabs.signals import register_signal
from oslabs.waiting import wait_example, wait_poll_example, zombie_example
from oslabs.forking import fork_example, execve_example
from oslabs.point import Point

process_state(os.getpid())   # 'R' for the running process

p = Point(1, 2)
p.x, p.y                     # (1, 2)
```

- `process_state(pid)` returns the one-letter state from `/proc/<pid>/status`,
  `"?"` if that file has no `State:` line, and raises `ProcessLookupError` if
  the file cannot be opened.
- `copy_stream(source, sink)` copies one binary stream to another in
  4096-byte chunks, flushes the sink and returns the number of bytes copied.
- `register_signal(signum)` installs a handler that prints
  `Ignoring signal <number>` and returns the handler it replaced.
- `wait_example(delay=2)` forks a child that sleeps `delay` seconds and exits
  with status 4, blocks in `wait`, and returns `(pid, exit_status)`.
- `wait_poll_example(delay=2)` forks a child that sleeps `delay` seconds and
  exits with status 0, then polls with a non-blocking `waitpid` once a second,
  returning `(pid, exit_status, attempts)`.
- `zombie_example(delay=1)` forks a child that sleeps `2 * delay` seconds,
  reads its state after `delay` seconds and again after a further `2 * delay`
  seconds (when it has exited but is not yet reaped, normally `Z`), then reaps
  it and returns both states.
- In the waiting examples a child that does not exit normally raises
  `ChildProcessError` with `ECHILD`.
- `fork_example()` forks; parent and child each print their pids and their own
  copy of a variable `x` (3 in the parent, 6 in the child). The parent waits
  for the child and returns `(child_pid, 3)`.
- `execve_example()` replaces the current process with `/usr/bin/ls -a` run
  with an empty environment; if that fails it prints the reason and returns
  the error number.

## What it does not do

There are no commands for the fork, exec and waiting examples; they are
called from Python. `Point` is a plain data class with no further operations.

## Tests

```
pip install .[test]
pytest
```