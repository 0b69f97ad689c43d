"""Core infrastructure: paths, configuration, theme, and logging."""
