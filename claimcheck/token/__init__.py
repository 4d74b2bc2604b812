"""Compact token parsing and claim verification."""
