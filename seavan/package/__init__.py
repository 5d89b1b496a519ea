"""Image packaging surfaces."""
