"""Gateway route modules."""
