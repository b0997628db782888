"""Building blocks for CQRS and event-sourced applications."""

__version__ = "0.1.0"