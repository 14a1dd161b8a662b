import pytest

from sigtalk.client import Sender, ServerBusyError, main
from sigtalk.protocol import Bit, byte_to_bits, frame_message
from sigtalk.server import Receiver, Reply

CLIENT_PID = 4242
SERVER_PID = 100


class Link:
    """Connects a Sender directly to a Receiver."""

    def __init__(self, receiver, client_pid=CLIENT_PID):
        self.receiver = receiver
        self.client_pid = client_pid
        self.sent = []
        self.targets = set()
        self._reply = None

    def send_bit(self, pid, bit):
        self.targets.add(pid)
        self.sent.append(bit)
        self._reply = self.receiver.handle(self.client_pid, bit)

    def wait_reply(self):
        return self._reply


def connected():
    received = []
    receiver = Receiver(lambda client, text: received.append((client, text)))
    link = Link(receiver)
    return Sender(SERVER_PID, link.send_bit, link.wait_reply), link, received


def test_message_round_trip():
    sender, _, received = connected()
    assert sender.send("hello world") is True
    assert received == [(CLIENT_PID, "hello world")]


def test_bits_match_frame_and_target():
    sender, link, _ = connected()
    sender.send("abc")
    expected = [bit for byte in frame_message("abc") for bit in byte_to_bits(byte)]
    assert link.sent == expected
    assert link.targets == {SERVER_PID}


def test_busy_server_raises():
    sender, link, received = connected()
    link.receiver.handle(999, Bit.ONE)
    with pytest.raises(ServerBusyError):
        sender.send("abc")
    assert received == []
    assert len(link.sent) == 1


def test_unconfirmed_final_byte_returns_false():
    sent = []
    sender = Sender(SERVER_PID, lambda pid, bit: sent.append(bit), lambda: Reply.ACK)
    assert sender.send("x") is False
    assert len(sent) == 8 * len(frame_message("x"))


def test_empty_message_rejected_by_sender():
    sender, _, _ = connected()
    with pytest.raises(ValueError):
        sender.send("")


def test_consecutive_messages():
    sender, _, received = connected()
    sender.send("one")
    sender.send("two")
    assert [text for _, text in received] == ["one", "two"]


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["123"],
        ["123", "hi", "extra"],
        ["123", ""],
        ["12a", "hi"],
        ["-", "hi"],
        ["-5", "hi"],
        ["99999999999", "hi"],
    ],
)
def test_main_rejects_bad_arguments(argv):
    assert main(argv) == 1