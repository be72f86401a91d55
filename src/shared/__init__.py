"""Shared infrastructure used across folio domains."""
