"""Adapters connecting the core to providers, loaders and user interfaces."""
