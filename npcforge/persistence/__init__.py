"""Writing generated characters to disk."""
