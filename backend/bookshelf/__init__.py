"""
Bookshelf API: Application Package
===================================

Layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (BookStore, in memory) │  ← CRUD rules, id uniqueness
    ├─────────────────────────────────────┤
    │        Schemas (Book, Envelope)     │  ← API contract
    └─────────────────────────────────────┘

Routes translate HTTP into store calls and store errors into envelope
responses; the store knows nothing about HTTP.
"""

__version__ = "1.0.0"
