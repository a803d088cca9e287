"""Savaj Seeds catalog backend."""
