"""HTTP API for Bot Lane Prio."""
