"""
Learning bounded context - Domain layer.

This context handles the flashcard catalogue:
- Flashcard creation and management
- Filtering by technology, category tag and free text

Entities:
- Flashcard: The study card
"""
