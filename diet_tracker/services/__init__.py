"""Clients for the remote diet backend."""
