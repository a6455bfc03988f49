"""HTTP surface over the analytics engines."""
