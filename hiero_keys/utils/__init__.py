"""Encoding, PEM and validation helpers."""
