"""
Core Client Logic
=================

Request construction, dispatch and response decoding.

Modules:
- decoding: schema templates and the recursive decode engine
- client: request builder, client handle and transport seam
"""
