"""Adapters around external I/O (HTTP transport)."""
