"""Copy a file, or standard input, to standard output."""

import errno
import sys
from typing import BinaryIO, Optional, Sequence

CHUNK_SIZE = 4096


def copy_stream(source: BinaryIO, sink: BinaryIO) -> int:
    """Copy ``source`` to ``sink`` in chunks until end of file; return the byte count."""
    total = 0
    for chunk in iter(lambda: source.read(CHUNK_SIZE), b""):
        sink.write(chunk)
        total += len(chunk)
    sink.flush()
    return total


def _report(operation: str, exc: OSError) -> None:
    print(f"{operation}: {exc.strerror or exc}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Copy the file named in ``argv`` (or standard input) to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        return errno.EINVAL

    source = sys.stdin.buffer
    if args:
        try:
            source = open(args[0], "rb")
        except OSError as exc:
            _report("open", exc)
            return exc.errno or 1

    try:
        copy_stream(source, sys.stdout.buffer)
    except OSError as exc:
        _report("copy", exc)
        return exc.errno or 1
    finally:
        if args:
            source.close()
    return 0