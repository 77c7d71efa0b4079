"""Core infrastructure: errors, XDG paths, settings and theming."""
