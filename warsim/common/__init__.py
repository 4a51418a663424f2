"""Shared card-handling primitives."""
