"""Switch model implementations."""
