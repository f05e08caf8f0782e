"""Wellbeing rules: stress."""
