"""Contracts the core relies on: persistence and export.

Adapters implement them structurally, so tests can swap in an in-memory
storage without touching the CLI.
"""
