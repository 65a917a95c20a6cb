"""Ambient support: settings and logging."""
