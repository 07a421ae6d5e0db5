"""Interactive terminal programs."""
