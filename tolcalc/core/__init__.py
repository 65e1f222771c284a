"""Core tolerance calculation package."""
