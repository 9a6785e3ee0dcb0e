"""Outbound adapters: remote providers and document loaders."""
