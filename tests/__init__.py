"""
Test Suite
==========

Test suite matching the plaid_income/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Endpoint functions wired through a mock transport
"""
