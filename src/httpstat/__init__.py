"""httpstat: phase-by-phase latency breakdown for a single HTTP request."""

__version__ = "0.1.0"
