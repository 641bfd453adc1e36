# Services package init
"""
Bookshelf API: Services Layer
==============================

Service Inventory:
    - BookStore: in-memory ordered book collection with CRUD operations
"""
