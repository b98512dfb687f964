"""
Emur Backend
REST API for the Emur community health-support application.

Users track symptoms, treatments, medical records and reminders, browse
recipes, articles and health-service directories, and receive weather
forecasts computed by a background worker.
"""

__version__ = "1.0.0"
