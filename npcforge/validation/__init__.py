"""Schema validation of model output."""
