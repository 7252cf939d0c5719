"""Infrastructure layer: remote API access."""
