# Routes package init
"""
Palette Picker Backend — API Routes Package
=============================================

Route Inventory:
    - root.py:      GET  /                              (greeting)
    - projects.py:  GET/POST/DELETE /api/v1/projects
                    GET/PUT         /api/v1/projects/{id}
    - palettes.py:  GET/POST/DELETE /api/v1/palettes
                    GET             /api/v1/palettes/chooseColors
                    GET/PATCH       /api/v1/palettes/{id}
    - health.py:    GET  /health                        (service health check)

Design Principle:
    Routes are THIN: validate the payload, call one service method, pick the
    status code. Errors are raised, never formatted here; the global exception
    handlers in main.py write every error response.
"""
