"""
External Integrations
Clients for the object store and the forecast provider.
"""
