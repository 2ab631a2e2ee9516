"""
Response Decoding
=================

Schema-driven mapping of parsed JSON onto nested pydantic models.

Components:
- schema: Leaf / Record / ListOf schema templates
- decoder: recursive decode engine
"""
