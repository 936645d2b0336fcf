"""
Client for the Food Catalog API: HTTP client, query cache and terminal UI.
"""
__version__ = "1.0.0"
