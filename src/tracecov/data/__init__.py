"""Packaged data files (JSON schema)."""
