# Middleware package init
"""
AreaWatch Backend: Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

Request ID runs first so every access-log line and error response can be
correlated through the same id.
"""
