"""
Core infrastructure: configuration, logging, error translation,
API key authentication and the in-memory product store.
"""
