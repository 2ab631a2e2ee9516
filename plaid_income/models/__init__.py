"""
Data Models
===========

Pydantic data models for API responses, results and errors.

Models:
- schemas: response records, Result and PlaidError
"""
