"""The receiving side: rebuilds messages from bits sent one signal at a time.

A sender transmits a frame (decimal length, NUL, message bytes, NUL) one
bit per signal. Every bit but the last of a frame is acknowledged; the
last is answered with a completion reply. A second sender that tries to
transmit while a frame is in progress is told the receiver is busy.
"""

from __future__ import annotations

import os
import signal
import sys
from enum import Enum
from typing import Callable, Optional, TextIO, Union

from .printf import printf
from .protocol import Bit, BitDecoder
from .strings import atoi

MessageHandler = Callable[[int, str], object]

_MAX_LENGTH_DIGITS = 10


class Reply(Enum):
    """The answer to one received bit.

    ACK travels as SIGUSR1. DONE and BUSY both travel as SIGUSR2; the
    sender tells them apart by how far its transmission has got.
    """

    ACK = "ack"
    DONE = "done"
    BUSY = "busy"


class Receiver:
    """Assembles the frames of one sender at a time."""

    def __init__(self, on_message: Optional[MessageHandler] = None) -> None:
        self._on_message = on_message
        self._decoder = BitDecoder()
        self.current_client: Optional[int] = None
        self._length_digits = bytearray()
        self._expected: Optional[int] = None
        self._body = bytearray()

    def _reset(self) -> None:
        self._decoder.reset()
        self.current_client = None
        self._length_digits.clear()
        self._expected = None
        self._body.clear()

    def _abort(self, reason: str) -> None:
        self._reset()
        raise ValueError(reason)

    def handle(self, sender: int, bit: Union[Bit, int]) -> Reply:
        """Take one bit from sender and return the reply it is owed.

        A frame that overruns its length field or its declared length
        discards the transmission and raises ValueError.
        """
        if self.current_client is None:
            self.current_client = sender
        if sender != self.current_client:
            return Reply.BUSY
        byte = self._decoder.feed(bit)
        if byte is None:
            return Reply.ACK
        if self._expected is None:
            if byte == 0:
                self._expected = max(atoi(self._length_digits.decode("latin-1")), 0)
                self._length_digits.clear()
            elif len(self._length_digits) >= _MAX_LENGTH_DIGITS:
                self._abort("length field is too long")
            else:
                self._length_digits.append(byte)
            return Reply.ACK
        if byte == 0:
            client = self.current_client
            text = bytes(self._body).decode("utf-8", errors="replace")
            self._reset()
            if self._on_message is not None:
                self._on_message(client, text)
            return Reply.DONE
        if len(self._body) >= self._expected:
            self._abort("message is longer than its declared length")
        self._body.append(byte)
        return Reply.ACK


def _reply_signal(reply: Reply) -> int:
    return signal.SIGUSR1 if reply is Reply.ACK else signal.SIGUSR2


def _answer(pid: int, reply: Reply) -> None:
    try:
        os.kill(pid, _reply_signal(reply))
    except ProcessLookupError:
        pass


def run_server(out: Optional[TextIO] = None) -> int:
    """Print the process id, then receive and print messages until SIGINT."""
    stream = sys.stdout if out is None else out

    def show(client: int, text: str) -> None:
        printf("%d: %s\n", client, text, stream=stream)
        stream.flush()

    printf("Server pid: %d\n\n", os.getpid(), stream=stream)
    stream.flush()
    receiver = Receiver(show)
    watched = {signal.SIGUSR1, signal.SIGUSR2, signal.SIGINT}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
    try:
        while True:
            info = signal.sigwaitinfo(watched)
            if info.si_signo == signal.SIGINT:
                break
            bit = Bit.ONE if info.si_signo == signal.SIGUSR1 else Bit.ZERO
            try:
                reply = receiver.handle(info.si_pid, bit)
            except ValueError:
                reply = Reply.BUSY
            _answer(info.si_pid, reply)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)
    return 0


def main(argv: Optional[list] = None) -> int:
    """Run the server; no arguments are taken."""
    return run_server(sys.stdout)


if __name__ == "__main__":
    sys.exit(main())