"""Configuration: env-driven settings and structlog wiring."""
