"""Settings, logging and shared category definitions."""
