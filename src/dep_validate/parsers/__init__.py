"""Manifest document parsers."""
