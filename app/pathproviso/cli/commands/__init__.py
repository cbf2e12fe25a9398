"""CLI command implementations.

Each module provides command functions registered on the main app.
"""
