"""
Services Module
Business logic layer for the application.

Services resolve related entities, enforce business rules and delegate
persistence to the repositories. They are called by API endpoints and keep
the controllers thin.
"""
