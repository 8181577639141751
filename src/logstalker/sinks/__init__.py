"""Concrete sink implementations."""
