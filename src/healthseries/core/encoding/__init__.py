"""Encoders for diagnostics and dashboard payloads."""
