"""Titanic survival analysis service."""
