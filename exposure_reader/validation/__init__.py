"""Shutter speed validation and notation patterns."""
