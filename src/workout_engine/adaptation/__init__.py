"""Adaptation generation and application."""
