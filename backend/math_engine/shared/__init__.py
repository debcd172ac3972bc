"""Shared numeric and validation helpers."""
