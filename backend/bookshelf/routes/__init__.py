# Routes package init
"""
Bookshelf API: Routes Package
==============================

Route Inventory:
    - greeting.py:  GET /hello/{name}
    - books.py:     GET /book/{id}, POST|PUT|DELETE /book/, any /books/
    - health.py:    GET /health

Routes stay thin: pull data out of the request, call the BookStore, and
return an Envelope. Failures are raised, not returned.
"""
