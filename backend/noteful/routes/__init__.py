# Routes package init
"""
Noteful Backend — API Routes Package
=====================================

Route Inventory:
    - folders.py: GET/POST         /api/folders
                  GET/PATCH/DELETE /api/folders/{id}
    - notes.py:   GET/POST         /api/notes
                  GET/PATCH/DELETE /api/notes/{id}
    - health.py:  GET              /health

Design Principle:
    Handlers check required fields, call the persistence gateway once (twice
    for DELETE/PATCH: look up, then write) and pick the status code.
"""
