"""
Application constants.

This module contains constants used throughout the application.
"""

# Server-side list endpoint page size when the caller sends none (or garbage)
DEFAULT_PAGE_SIZE = 20

# Upper bound for a single page. Kept equal to the study ceiling so the
# study working-set request is never clamped.
MAX_PAGE_SIZE = 500

# Study mode loads its whole working set in one request of this size.
# Filters matching more cards than this are silently truncated.
STUDY_MODE_MAX_CARDS = 500

# Page size used by the browsing list's infinite scroll
LIST_PAGE_SIZE = 3

# Search input debounce
SEARCH_DEBOUNCE_SECONDS = 0.5
SEARCH_MIN_LENGTH = 2

AUTH_COOKIE_NAME = "token"
