"""Core layer: configuration, logging, clock, styling and errors."""
