"""Single-file transfer over TCP using fixed-size, NUL-padded records."""

from __future__ import annotations

import argparse
import os
import socket
import sys
import time
from collections.abc import Sequence

RECORD_SIZE = 100
ERROR_REPLY = b"error"
COMPLETED_REPLY = b"completed"


def _pack(payload: bytes) -> bytes:
    return payload.ljust(RECORD_SIZE, b"\0")


def _recv_record(sock: socket.socket) -> bytes | None:
    """Read one record and return its payload, or None once the peer has closed."""
    buffer = b""
    while len(buffer) < RECORD_SIZE:
        part = sock.recv(RECORD_SIZE - len(buffer))
        if not part:
            break
        buffer += part
    return buffer.split(b"\0", 1)[0] if buffer else None


def serve_file(conn: socket.socket, delay: float = 1.0) -> bool:
    """Answer one file request on ``conn``; return whether the file was sent.

    Lines go out in records of at most ``RECORD_SIZE - 1`` bytes, ``delay``
    seconds apart, then a completion record. A missing file gets an error
    record and the connection is closed.
    """
    request = _recv_record(conn)
    if request is None:
        raise ConnectionError("client closed the connection before naming a file")
    try:
        handle = open(os.fsdecode(request), "rb")
    except OSError:
        conn.sendall(_pack(ERROR_REPLY))
        conn.close()
        return False
    with handle:
        for chunk in iter(lambda: handle.readline(RECORD_SIZE - 1), b""):
            conn.sendall(_pack(chunk))
            if delay > 0:
                time.sleep(delay)
    conn.sendall(_pack(COMPLETED_REPLY))
    return True


def fetch_file(sock: socket.socket, remote_name, out) -> int:
    """Request ``remote_name``, write its contents to ``out`` and return the byte count."""
    encoded = os.fsencode(remote_name)
    if b"\0" in encoded or len(encoded) >= RECORD_SIZE:
        raise ValueError(f"file name must be free of NUL and shorter than {RECORD_SIZE} bytes")
    sock.sendall(_pack(encoded))
    total = 0
    while True:
        record = _recv_record(sock)
        if record is None:
            raise ConnectionError("connection closed before the transfer completed")
        if record == ERROR_REPLY:
            raise FileNotFoundError(f"file is not available on the server: {os.fsdecode(encoded)}")
        if record == COMPLETED_REPLY:
            return total
        out.write(record)
        total += len(record)


class _Echo:
    """Writes received bytes to a file and echoes them to standard output."""

    def __init__(self, target) -> None:
        self.target = target

    def write(self, data: bytes) -> None:
        self.target.write(data)
        print(data.decode("utf-8", errors="replace"), end="", flush=True)


def run_server(port: int) -> bool:
    """Accept one client on ``port`` and serve the file it asks for."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        print("Socket is created")
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind(("", port))
        print("Binded")
        listener.listen(5)
        conn, _ = listener.accept()
        print("Accepted")
        with conn:
            return serve_file(conn)


def run_client(port: int, remote_name: str, local_name: str) -> int:
    """Fetch ``remote_name`` from the local server on ``port`` into ``local_name``."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        print("Socket is created")
        sock.connect(("127.0.0.1", port))
        print("connected")
        with open(local_name, "wb") as handle:
            size = fetch_file(sock, remote_name, _Echo(handle))
    print("File is transferred........")
    return size


def main(argv: Sequence[str] | None = None) -> int:
    """Serve a file or fetch one, depending on the chosen command."""
    parser = argparse.ArgumentParser(description="Transfer a single file over TCP.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("serve").add_argument("port", type=int)
    get = commands.add_parser("get")
    get.add_argument("port", type=int)
    get.add_argument("remote_name")
    get.add_argument("local_name")
    args = parser.parse_args(argv)
    try:
        if args.command == "serve":
            run_server(args.port)
        else:
            run_client(args.port, args.remote_name, args.local_name)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())