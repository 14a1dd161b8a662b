"""The sending side: transmits a message one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, List, Optional, Union

from .printf import printf
from .protocol import Bit, byte_to_bits, frame_message, parse_pid
from .server import Reply

_PAUSE = 50e-6


class ServerBusyError(RuntimeError):
    """Raised when the receiver is already serving another sender."""


class Sender:
    """Sends frames bit by bit, waiting for a reply after every bit.

    send_bit(pid, bit) transmits one bit; wait_reply() blocks until the
    receiver answers. Any reply other than ACK stands for SIGUSR2.
    """

    def __init__(
        self,
        pid: int,
        send_bit: Callable[[int, Bit], object],
        wait_reply: Callable[[], Reply],
    ) -> None:
        self.pid = pid
        self._send_bit = send_bit
        self._wait_reply = wait_reply

    def _exchange(self, bit: Bit) -> Reply:
        self._send_bit(self.pid, bit)
        return self._wait_reply()

    def send(self, message: Union[str, bytes]) -> bool:
        """Send a message; return True when the receiver confirmed it.

        A non-acknowledging reply before the closing byte means the
        receiver is busy and raises ServerBusyError.
        """
        frame = frame_message(message)
        for byte in frame[:-1]:
            for bit in byte_to_bits(byte):
                if self._exchange(bit) is not Reply.ACK:
                    raise ServerBusyError("Server is busy. Please try again in a moment.")
        for bit in byte_to_bits(frame[-1]):
            if self._exchange(bit) is not Reply.ACK:
                return True
        return False


def _kill_bit(pid: int, bit: Bit) -> None:
    os.kill(pid, signal.SIGUSR1 if bit is Bit.ONE else signal.SIGUSR2)


def _wait_signal() -> Reply:
    signo = signal.sigwait({signal.SIGUSR1, signal.SIGUSR2})
    time.sleep(_PAUSE)
    return Reply.ACK if signo == signal.SIGUSR1 else Reply.DONE


def send_message(message: Union[str, bytes], pid: int) -> bool:
    """Send a message to the process pid; return True when it was confirmed."""
    watched = {signal.SIGUSR1, signal.SIGUSR2}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
    try:
        return Sender(pid, _kill_bit, _wait_signal).send(message)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[List[str]] = None) -> int:
    """Take a receiver pid and a message, send it, and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2 or args[1] == "":
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        return 1
    if pid < 0:
        return 1
    try:
        confirmed = send_message(args[1], pid)
    except ServerBusyError:
        printf("Server is busy. Please try again in a moment.\n")
        return 1
    except KeyboardInterrupt:
        return 0
    if confirmed:
        printf("Message sent.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())