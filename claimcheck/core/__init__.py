"""Settings, logging, errors, and the application factory."""
