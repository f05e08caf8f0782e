"""Health-metric validation and analysis."""
