# Middleware package init
"""
Package Sorter — Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error bodies
    2. Logging: Log request outcome with the generated request ID
    3. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)
"""
