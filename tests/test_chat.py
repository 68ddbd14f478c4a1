import io
import socket
import threading

import pytest

from netlab.chat import MESSAGE_SIZE, client_session, is_exit, server_session


def _pair():
    a, b = socket.socketpair()
    a.settimeout(5)
    b.settimeout(5)
    return a, b


@pytest.mark.parametrize(
    "message, expected",
    [("exit\n", True), ("exitnow", True), ("Exit\n", False), ("ex", False), ("hello", False)],
)
def test_is_exit(message, expected):
    assert is_exit(message) is expected


def test_full_conversation():
    server_end, client_end = _pair()
    server_out = io.StringIO()
    server_result = []
    thread = threading.Thread(
        target=lambda: server_result.append(
            server_session(server_end, ["hi\n", "exit\n"], server_out)
        )
    )
    thread.start()
    client_out = io.StringIO()
    replies = client_session(client_end, ["hello\n", "bye\n"], client_out)
    thread.join(5)
    server_end.close()
    client_end.close()
    assert replies == ["hi\n", "exit\n"]
    assert server_result == [["hello\n", "bye\n"]]
    assert "Server Exit...\n" in server_out.getvalue()
    assert client_out.getvalue().endswith("Client Exit...\n")
    assert "From Server : hi\n" in client_out.getvalue()


def test_client_wire_format_and_newline():
    server_end, client_end = _pair()
    seen = []

    def fake_server():
        data = bytearray()
        while len(data) < MESSAGE_SIZE:
            data += server_end.recv(MESSAGE_SIZE - len(data))
        seen.append(bytes(data))
        server_end.sendall(b"exit\n".ljust(MESSAGE_SIZE, b"\0"))

    thread = threading.Thread(target=fake_server)
    thread.start()
    replies = client_session(client_end, ["ping"], io.StringIO())
    thread.join(5)
    server_end.close()
    client_end.close()
    assert seen == [b"ping\n".ljust(MESSAGE_SIZE, b"\0")]
    assert replies == ["exit\n"]


def test_client_stops_when_lines_run_out():
    server_end, client_end = _pair()
    out = io.StringIO()
    assert client_session(client_end, [], out) == []
    assert out.getvalue() == "Enter the string : "
    server_end.close()
    client_end.close()


def test_message_too_long():
    server_end, client_end = _pair()
    with pytest.raises(ValueError):
        client_session(client_end, ["z" * MESSAGE_SIZE], io.StringIO())
    server_end.close()
    client_end.close()


def test_client_raises_when_server_closes():
    server_end, client_end = _pair()
    server_end.close()
    with pytest.raises(ConnectionError):
        client_session(client_end, ["hello\n"], io.StringIO())
    client_end.close()