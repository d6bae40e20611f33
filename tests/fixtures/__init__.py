"""Test fixture data and helpers."""
