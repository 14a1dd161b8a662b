"""Text messages between processes carried bit by bit over POSIX user signals."""

__version__ = "0.1.0"