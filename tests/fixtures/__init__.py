"""Shared factories for tests."""
