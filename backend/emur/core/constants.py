"""
Application Constants
Defines constant values used throughout the application.

This module contains all application-wide constants including:
- User roles
- Accepted upload types
- Date formats used by request payloads
"""

# User Roles (stored in the roles table, carried in the JWT "role" claim)
ROLE_ADMIN = "admin"  # Content management, catalog maintenance
ROLE_USER = "user"  # Regular member of the community

VALID_ROLES = [ROLE_ADMIN, ROLE_USER]

# Upload content types accepted for images
CONTENT_TYPE_PNG = "image/png"
CONTENT_TYPE_JPEG = "image/jpeg"

ALLOWED_IMAGE_TYPES = [CONTENT_TYPE_PNG, CONTENT_TYPE_JPEG]

# Thumbnail bounding box for recipe images (pixels)
THUMBNAIL_SIZE = (200, 200)

# Date formats
DATE_OF_BIRTH_FORMAT = "%d-%m-%Y"  # e.g. 31-12-1990
REMINDER_DATE_FORMAT = "%d/%m/%Y"  # e.g. 31/12/2024 (multipart forms)

# Recipe votes
MIN_VOTE = 1
MAX_VOTE = 5

# Medical registry CSV import
MEDICAL_CSV_ENCODING = "latin-1"
MEDICAL_CSV_DELIMITER = ";"

# Pagination
DEFAULT_PAGE_SIZE = 50
