"""
Plaid Income Client
===================

Typed asynchronous client for the Plaid "income" family of HTTP endpoints.

This package provides:
- Endpoint functions for income, bank income, credit sessions and user tokens
- A pluggable transport seam so tests can substitute a mock client
- A schema-driven decoder mapping raw JSON onto nested pydantic models
- Environment-based settings and structured logging
"""

__version__ = "1.0.0"
__author__ = "Plaid Income Client Team"
