"""
HTTP and WebSocket Endpoints
============================

FastAPI application exposing the mock streaming endpoints.

Endpoints:
- OPTIONS *: CORS preflight
- * /health, /healthz, /ready: Health check
- GET /ws-test: WebSocket test page
- WS /ws: WebSocket echo with heartbeats
- * (anything else): Server-Sent Events heartbeat stream
"""
