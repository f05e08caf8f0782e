"""Goal-driven plan generation and injury-safe exercise substitution."""
