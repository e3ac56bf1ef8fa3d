"""
Data Models
===========

Pydantic models for HTTP response bodies.

Models:
- schemas: API response schemas
"""
