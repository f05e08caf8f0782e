"""Pure scoring and trend calculations."""
