"""Line-based chat between one TCP server and one client using 80-byte messages."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

MESSAGE_SIZE = 80
DEFAULT_PORT = 8080
DEFAULT_HOST = "127.0.0.1"


def is_exit(message: str) -> bool:
    """Return whether a message ends the chat: it starts with ``exit``."""
    return message.startswith("exit")


def _pack(line: str) -> bytes:
    if not line.endswith("\n"):
        line += "\n"
    data = line.encode("utf-8")
    if len(data) > MESSAGE_SIZE:
        raise ValueError(f"message longer than {MESSAGE_SIZE} bytes")
    return data.ljust(MESSAGE_SIZE, b"\0")


def _recv_message(sock: socket.socket) -> str | None:
    buffer = bytearray()
    while len(buffer) < MESSAGE_SIZE:
        part = sock.recv(MESSAGE_SIZE - len(buffer))
        if not part:
            break
        buffer += part
    if not buffer:
        return None
    return bytes(buffer).split(b"\0", 1)[0].decode("utf-8", errors="replace")


def client_session(sock: socket.socket, lines: Iterable[str], output: TextIO) -> list[str]:
    """Send each line and wait for the server's reply; return the replies.

    The session ends when the lines run out or a reply starts with ``exit``.
    """
    pending = iter(lines)
    replies: list[str] = []
    while True:
        output.write("Enter the string : ")
        output.flush()
        line = next(pending, None)
        if line is None:
            break
        sock.sendall(_pack(line))
        reply = _recv_message(sock)
        if reply is None:
            raise ConnectionError("server closed the connection")
        replies.append(reply)
        output.write(f"From Server : {reply}")
        if is_exit(reply):
            output.write("Client Exit...\n")
            break
    return replies


def server_session(conn: socket.socket, lines: Iterable[str], output: TextIO) -> list[str]:
    """Answer each client message with the next line; return the client's messages.

    The session ends when the client disconnects, the lines run out, or the
    server sends a line starting with ``exit``.
    """
    pending = iter(lines)
    received: list[str] = []
    while True:
        message = _recv_message(conn)
        if message is None:
            break
        received.append(message)
        output.write(f"From client: {message}\t To client : ")
        output.flush()
        line = next(pending, None)
        if line is None:
            break
        conn.sendall(_pack(line))
        if is_exit(line):
            output.write("Server Exit...\n")
            break
    return received


def _serve(port: int) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        print("Socket successfully created..")
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind(("", port))
        print("Socket successfully binded..")
        listener.listen(5)
        print("Server listening..")
        conn, _ = listener.accept()
        print("server accept the client...")
        with conn:
            server_session(conn, sys.stdin, sys.stdout)


def _connect(host: str, port: int) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        print("Socket successfully created..")
        sock.connect((host, port))
        print("connected to the server..")
        client_session(sock, sys.stdin, sys.stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chat server or client."""
    parser = argparse.ArgumentParser(description="Chat over TCP, one line at a time.")
    parser.add_argument("role", choices=("server", "client"))
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address for the client")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        if args.role == "server":
            _serve(args.port)
        else:
            _connect(args.host, args.port)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())