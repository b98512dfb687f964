"""
Version 1 of the emur REST API, mounted under /api/v1.
"""
