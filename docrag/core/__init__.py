"""Core domain, ports and services of the retrieval pipeline."""
