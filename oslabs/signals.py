"""Copy input to output while ignoring interrupt and termination signals."""

import errno
import signal
import sys
from types import FrameType
from typing import Optional, Sequence

from oslabs import streams


def handle_signal(signum: int, frame: Optional[FrameType]) -> None:
    """Report a received signal and carry on."""
    print(f"Ignoring signal {signum}", flush=True)


def register_signal(signum: int):
    """Install :func:`handle_signal` for ``signum`` and return the previous handler."""
    return signal.signal(signum, handle_signal)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Copy a file or standard input to standard output, ignoring SIGINT and SIGTERM."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        return errno.EINVAL

    previous = {}
    try:
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[signum] = register_signal(signum)
        return streams.main(args)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)