"""Embed JSON schemas with resolved definitions into generated Python modules."""
