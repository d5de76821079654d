"""Example applications composed from partkit parts.

This package demonstrates library usage but is not part of the core API.
"""
