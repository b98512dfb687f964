"""
Core Module
Configuration, security primitives, constants and domain errors.
"""
