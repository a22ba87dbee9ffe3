"""Comparative timing harness for growable sequence containers."""
