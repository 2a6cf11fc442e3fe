"""
API server package — HTTP interface over the static root directory.

Builds the FastAPI application: access logging middleware in front of a
single catch-all file route.
"""
