"""Configuration, dependency providers and the error taxonomy."""
