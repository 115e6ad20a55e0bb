"""Thin wrappers over the operating system."""
