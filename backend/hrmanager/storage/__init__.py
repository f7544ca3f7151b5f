"""File persistence."""
