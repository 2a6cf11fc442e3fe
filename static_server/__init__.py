"""
Static Server — serve files from a local directory over HTTP.

Maps request paths to files under a configured root directory, infers the
content type from the file extension and logs every request/response pair
as a structured record.
"""

__version__ = "0.1.0"
