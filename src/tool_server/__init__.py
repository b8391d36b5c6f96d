"""Stdio tool server."""
