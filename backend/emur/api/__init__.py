"""
API Package
Versioned HTTP endpoints.
"""
