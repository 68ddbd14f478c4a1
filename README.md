# netlab

Small networking exercises that you can run from the command line or use as a
library: distance-vector routing tables, a leaky bucket, a stop-and-wait ARQ
simulation, and minimal TCP and UDP tools.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

### `netlab-routing`

Reads a node count followed by the cost matrix (whitespace separated) from
standard input and prints, for every router, the next hop and distance to each
node. Node numbers in the output start at 1; the diagonal of the matrix is
treated as zero. Negative costs or truncated input are reported as errors.

    printf '3\n0 2 7\n2 0 1\n7 1 0\n' | netlab-routing

### `netlab-leaky-bucket`

Reads the bucket size, the outgoing rate and the number of inputs, then that
many incoming packet sizes, all from standard input. For each burst it prints
what was buffered, how many packets were dropped and how many are left after
the bucket drains.

    printf '10 3 3\n4 8 2\n' | netlab-leaky-bucket

### `netlab-stop-and-wait`

Simulates a sender and receiver exchanging frames; each frame or
acknowledgement is lost with probability 1/4, and the sender retransmits after
its timer runs out. Options:

- `--frames N` — number of frames to deliver (default 5)
- `--timeout N` — timer ticks before a retransmission (default 5)
- `--seed N` — seed for the random loss, for a reproducible run

### `netlab-ftp`

Transfers one file over TCP in fixed 100-byte, NUL-padded records.

    netlab-ftp serve PORT
    netlab-ftp get PORT REMOTE_NAME LOCAL_NAME

`serve` accepts a single client, sends the requested file line by line (one
record per second), then a completion record; if the file cannot be opened it
answers with an error record. `get` connects to `127.0.0.1` on `PORT`, saves
the file as `LOCAL_NAME` and echoes its contents to standard output.

### `netlab-chat`

A line-by-line chat between one server and one client using 80-byte messages.

    netlab-chat server [--port PORT]
    netlab-chat client [--host HOST] [--port PORT]

The port defaults to 8080 and the client's host to `127.0.0.1`. Each side
reads its lines from standard input; the client sends first and waits for a
reply. A message starting with `exit` from the server ends the session.

### `netlab-datagram`

Exchanges a single UDP datagram of 100 NUL-padded bytes.

    netlab-datagram serve PORT
    netlab-datagram send HOST PORT

`serve` waits for one datagram and prints its text; `send` reads one line from
standard input and sends it, cut to 99 bytes.

## Library use

    from netlab.routing import compute_routes, format_routes

    routes = compute_routes([[0, 2, 7], [2, 0, 1], [7, 1, 0]])
    print(format_routes(routes))
    print(routes[0][2])  # Route(destination=2, next_hop=1, distance=3)

    from netlab.leaky_bucket import LeakyBucket, simulate

    for step in simulate(capacity=10, rate=3, packets=[4, 8, 2]):
        print(step.describe(10))

    import random
    from netlab.stop_and_wait import StopAndWait

    for event in StopAndWait(frames=5, timeout=5, rng=random.Random(1)).run():
        print(event)

- `netlab.routing`: `Route`, `compute_routes(costs)`, `format_routes(routes)`.
- `netlab.leaky_bucket`: `LeakyBucket(capacity, rate)` with `offer(size)`
  returning a `BucketStep`; `simulate(capacity, rate, packets)`.
- `netlab.stop_and_wait`: `StopAndWait(frames, timeout, rng)` whose `run()`
  yields `Event` objects tagged with an `EventKind`.
- `netlab.filetransfer`: `serve_file(conn, delay)` and
  `fetch_file(sock, remote_name, out)` work on already connected sockets;
  `fetch_file` raises `FileNotFoundError` when the server reports the file as
  unavailable. `run_server(port)` and `run_client(port, remote_name,
  local_name)` do the whole exchange.
- `netlab.chat`: `client_session(sock, lines, output)`,
  `server_session(conn, lines, output)` and `is_exit(message)`.
- `netlab.datagram`: `send_message(host, port, message)` and
  `receive_message(sock, bufsize)`.

## Limitations

- The file transfer is its own record format, not the FTP protocol: one file
  per connection, one client per server run, no listing, upload or
  authentication, and the client always connects to `127.0.0.1`.
- The chat and datagram servers handle a single client or a single datagram
  and then exit.
- Nothing is encrypted.