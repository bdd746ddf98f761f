"""Generators package."""
