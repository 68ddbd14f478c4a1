import io
import socket

import pytest

from netlab.datagram import BUFFER_SIZE, main, receive_message, send_message


@pytest.fixture
def receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


def test_round_trip(receiver):
    port = receiver.getsockname()[1]
    sent = send_message("127.0.0.1", port, "hello\n")
    assert sent == BUFFER_SIZE
    assert receive_message(receiver) == "hello\n"


def test_datagram_is_padded(receiver):
    port = receiver.getsockname()[1]
    sent = send_message("127.0.0.1", port, "hi")
    data, _ = receiver.recvfrom(BUFFER_SIZE * 2)
    assert sent == BUFFER_SIZE
    assert data == b"hi".ljust(BUFFER_SIZE, b"\0")


def test_long_message_truncated(receiver):
    port = receiver.getsockname()[1]
    send_message("127.0.0.1", port, "a" * (BUFFER_SIZE + 50))
    assert receive_message(receiver) == "a" * (BUFFER_SIZE - 1)


def test_bad_bufsize(receiver):
    with pytest.raises(ValueError):
        receive_message(receiver, 0)


def test_main_send(receiver, monkeypatch, capsys):
    port = receiver.getsockname()[1]
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin\n"))
    assert main(["send", "127.0.0.1", str(port)]) == 0
    assert receive_message(receiver) == "from stdin\n"
    assert "Enter a message to be sent to server" in capsys.readouterr().out