"""
Palette Picker Backend — Middleware Package
=============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Access log + request id] → [GZip] → [CORS] → Route Handler

    The access middleware binds the request id before anything else runs and
    logs once the route and any {"error": ...} outcome are known.
"""
