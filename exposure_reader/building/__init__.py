"""Exposure record building."""
