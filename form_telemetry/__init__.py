"""Form interaction telemetry service."""

__version__ = "1.0.0"
