"""Demonstrations of POSIX process creation, waiting, process state, signals and stream I/O."""

__version__ = "0.1.0"