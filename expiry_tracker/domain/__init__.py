"""Domain layer - Label date extraction and freshness classification."""
