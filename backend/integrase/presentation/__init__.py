"""Presentation layer - HTTP endpoints the directory calls."""
