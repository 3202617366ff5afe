"""Supporting modules around the filter core."""
