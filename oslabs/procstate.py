"""Look up the scheduler state of a process through /proc."""

from pathlib import Path

PROC_ROOT = Path("/proc")
UNKNOWN_STATE = "?"


def process_state(pid: int) -> str:
    """Return the one-letter state of ``pid`` as reported by ``/proc/<pid>/status``.

    Returns ``"?"`` when the status file has no ``State:`` line and raises
    :class:`ProcessLookupError` when the status file cannot be opened.
    """
    path = PROC_ROOT / str(pid) / "status"
    try:
        with path.open(encoding="utf-8", errors="replace") as status:
            for line in status:
                if line.startswith("State:"):
                    value = line[len("State:"):].strip()
                    return value[:1] or UNKNOWN_STATE
    except OSError as exc:
        raise ProcessLookupError(exc.errno, f"cannot open {path}", str(path)) from exc
    return UNKNOWN_STATE