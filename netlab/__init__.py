"""Networking exercises: routing tables, leaky bucket, stop-and-wait ARQ and TCP/UDP tools."""

__version__ = "0.1.0"