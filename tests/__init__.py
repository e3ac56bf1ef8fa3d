"""
Test Suite
==========

Test suite matching the src/ directory structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Full application tests over HTTP, SSE and WebSocket
"""
