"""
Database Module
SQLAlchemy declarative base, engine and session factory.
"""
