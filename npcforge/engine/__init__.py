"""Generation run loop."""
