"""Self-test harness package."""
