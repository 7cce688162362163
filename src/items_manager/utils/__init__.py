"""Utility helpers for Items Manager."""
