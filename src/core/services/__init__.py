"""Orchestration services of the Core."""
