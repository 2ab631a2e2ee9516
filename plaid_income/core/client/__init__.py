"""
HTTP Client Seam
================

Request building and the injectable transport used by endpoint functions.

Components:
- request: request value and metadata merging
- connection: aiohttp-backed client handle
- transport: transport interface and default implementation
"""
