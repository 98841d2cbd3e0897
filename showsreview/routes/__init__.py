"""
Shows Review — Routes Package
==============================

Route Inventory:
    - pages.py:   GET /, GET /movies, GET /tv-shows  (Dispatcher page handlers)

Page handlers are THIN and pure: they return a ViewDescriptor and leave
rendering to the Renderer, so they can be tested without HTTP.
"""
