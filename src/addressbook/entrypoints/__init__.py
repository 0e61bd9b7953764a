"""Entrypoints (driving adapters) for ADDRESSBOOK."""
