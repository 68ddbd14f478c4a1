"""Send and receive a single text datagram over UDP."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence

BUFFER_SIZE = 100


def send_message(host: str, port: int, message: str) -> int:
    """Send ``message`` as one NUL-padded datagram of ``BUFFER_SIZE`` bytes.

    Text beyond ``BUFFER_SIZE - 1`` bytes is cut off. Returns the bytes sent.
    """
    data = message.encode("utf-8")[: BUFFER_SIZE - 1].ljust(BUFFER_SIZE, b"\0")
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        return sock.sendto(data, (host, port))


def receive_message(sock: socket.socket, bufsize: int = BUFFER_SIZE) -> str:
    """Wait for one datagram on ``sock`` and return its text up to the first NUL."""
    if bufsize < 1:
        raise ValueError("buffer size must be positive")
    data, _ = sock.recvfrom(bufsize)
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def main(argv: Sequence[str] | None = None) -> int:
    """Wait for a datagram, or send one line read from standard input."""
    parser = argparse.ArgumentParser(description="Exchange a single UDP datagram.")
    commands = parser.add_subparsers(dest="command", required=True)
    serve = commands.add_parser("serve", help="wait for one datagram")
    serve.add_argument("port", type=int)
    send = commands.add_parser("send", help="send one line read from standard input")
    send.add_argument("host")
    send.add_argument("port", type=int)
    args = parser.parse_args(argv)

    try:
        if args.command == "serve":
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.bind(("", args.port))
                print("server waiting.....", end="", flush=True)
                text = receive_message(sock)
            print(f"Got a datagram:{text}", end="")
        else:
            print("Enter a message to be sent to server", end="", flush=True)
            send_message(args.host, args.port, sys.stdin.readline())
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())