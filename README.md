# sigtalk

A small messaging pair for POSIX systems: a server that waits for text and a
client that delivers it, using nothing but the two user signals.

Every byte travels as eight signals, most significant bit first: `SIGUSR1`
carries a 1 and `SIGUSR2` carries a 0. The client first sends the message
length in bytes as decimal text ended by a NUL byte, then the message itself
(UTF-8) ended by a NUL byte. The server acknowledges every bit with `SIGUSR1`
and answers the final bit with `SIGUSR2`; the client waits for the server's
answer before sending the next bit.

The server and client rely on `signal.sigwaitinfo`, `signal.sigwait` and
`signal.pthread_sigmask`, so they need a platform where Python provides
those (Linux does).

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

Start the server in one terminal. It prints its process id followed by a
blank line, then every message it receives, prefixed with the sender's
process id:

```
sigtalk-server
```

```
Server pid: 4242

```

In another terminal, send a message to that process id:

```
sigtalk-client 4242 "hello there"
```

The client prints `Message sent.` once the server has answered the final bit,
and the server prints:

```
5151: hello there
```

The server serves one client at a time. A client that signals it while
another transfer is under way gets `SIGUSR2` before its message is complete,
prints `Server is busy. Please try again in a moment.` and exits with status
1. A frame whose length field runs past ten digits, or whose message runs
past its declared length, is discarded and its sender is answered the same
way. Press Ctrl-C to stop the server.

The client exits with status 1 if it is not given exactly a process id and a
non-empty message, or if the process id is not a whole, non-negative 32-bit
integer. It has no timeout: it waits for the server's answer to each bit for
as long as it takes.

Both commands can also be started as `python -m sigtalk.server` and
`python -m sigtalk.client PID MESSAGE`.

## Using it from Python

`sigtalk.protocol` holds the wire format:

- `frame_message(message)` returns the bytes that are sent for a `str` or
  `bytes` message, and raises `ValueError` for an empty message or one that
  holds a NUL byte.
- `byte_to_bits(value)` splits a byte into eight `Bit` values (`Bit.ONE`,
  `Bit.ZERO`), most significant first.
- `BitDecoder.feed(bit)` gathers bits and returns the completed byte after
  every eighth; `reset()` drops a partial byte.
- `parse_pid(text)` parses a whole string as a signed 32-bit integer and
  raises `ValueError` for anything else.

`sigtalk.server.Receiver(on_message)` is the server's state machine. Call
`handle(sender, bit)` for each incoming bit; it returns the `Reply` owed
(`ACK`, `DONE` or `BUSY`) and calls `on_message(sender, text)` with each
complete message. `run_server(out)` runs it on real signals, writing to
`out` (stdout by default).

`sigtalk.client.Sender(pid, send_bit, wait_reply)` drives a transfer through
any pair of callables. `send(message)` returns `True` once the final bit is
answered with something other than `ACK`, and raises `ServerBusyError` if a
non-`ACK` reply comes earlier. `send_message(message, pid)` does the same
over real signals.

```python
from sigtalk.client import Sender
from sigtalk.server import Receiver

received = []
receiver = Receiver(lambda pid, text: received.append((pid, text)))
replies = []
sender = Sender(
    1234,
    lambda pid, bit: replies.append(receiver.handle(pid, bit)),
    lambda: replies.pop(),
)
assert sender.send("hi")
assert received == [(1234, "hi")]
```

The package also carries the small helpers it is built on:

- `sigtalk.chars`: ASCII tests and case mapping (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
- `sigtalk.memory`: byte-buffer helpers (`memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`).
- `sigtalk.strings`: C-style string helpers (`atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strjoin`, `strnstr`, `strchr`, `strrchr`, `strncmp`,
  `strlcpy`, `strlcat`, `strmapi`, `striteri`); searches return indexes or
  `None`, and `strlcpy`/`strlcat` return the resulting text together with
  the length they report.
- `sigtalk.output`: writers to a text stream (`put_char`, `put_str`,
  `put_endl`, `put_nbr`).
- `sigtalk.printf`: `sprintf` and `printf` supporting `%c %s %p %d %i %u %x
  %X %%`; a `%` followed by any other character prints a single `%` and drops
  that character. `printf` returns the number of characters written.
- `sigtalk.linkedlist`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `iterate`, `map`,
  `len()` and iteration.