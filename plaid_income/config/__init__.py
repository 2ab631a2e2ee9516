"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Plaid credentials, environment and HTTP client settings
- logging: Structured logging configuration
"""
