"""
Bookstore catalog service.

A small FastAPI application exposing the shop's book catalogue
(lookups by ISBN, author and title plus per-book reviews) and a
customer registration endpoint. Catalogue and users are held in
memory; see ``bookstore.main.create_app`` for how they are wired.
"""
