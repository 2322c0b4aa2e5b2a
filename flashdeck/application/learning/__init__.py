"""
Learning bounded context - Application layer.

Contains use cases for flashcard management:
- Commands: Create, Update, Delete flashcards
- Queries: Get, List (filtered and paginated), List categories
"""
