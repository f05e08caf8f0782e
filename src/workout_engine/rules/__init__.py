"""Metric threshold rules, auto-discovered by the RuleRegistry."""
