# Services package init
"""
Palette Picker Backend — Services Layer
=========================================

What:  Store operations sitting between routes (HTTP) and the database.
Why:   Routes handle HTTP; services own the one statement each operation issues.

Service Inventory:
    - ProjectService: list/get/create/update/delete projects
    - PaletteService: list/get/create/patch/delete palettes, color search
"""
