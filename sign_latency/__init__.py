"""Latency tester for the raw payload signing API."""

__version__ = "0.1.0"
