"""Exposure compensation normalization."""
