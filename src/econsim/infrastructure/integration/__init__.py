"""Clients and adapters for external services."""
