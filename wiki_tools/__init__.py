"""Clients and queries for external knowledge sources."""
