"""
Mock SSE & WebSocket Service
============================

A small FastAPI service that stands in for streaming backends during client
development and testing.

This package provides:
- Server-Sent Events streams with periodic heartbeats on any path
- WebSocket echo endpoint with heartbeats
- Health check endpoints
- Graceful shutdown that closes WebSocket clients before the listener stops
"""

__version__ = "1.0.0"
__author__ = "Mock Stream Service Team"
