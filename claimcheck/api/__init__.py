"""Public verification entry points."""
