"""Core domain: wire models and derived dashboard views."""
