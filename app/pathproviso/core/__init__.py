"""Core services: paths, theme, rules file I/O and batch verification."""
