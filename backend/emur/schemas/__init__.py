"""
Pydantic Schemas
Request and response models for the API, grouped by feature area.
"""
