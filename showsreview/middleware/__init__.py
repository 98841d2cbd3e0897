"""
Shows Review — Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → Page endpoint / static files

    1. Request ID: Assign or accept a correlation ID
    2. Logging: Log method, path, status and duration with that ID

The response passes back through the chain in reverse, so the request ID
header is attached to every response, error pages included.
"""
