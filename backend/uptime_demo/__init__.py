"""
uptime-demo: a delayed counter emitter.

Prints a greeting and a styled info line, then counts up once per delay
and finishes with "Done".
"""

__version__ = "0.1.0"
