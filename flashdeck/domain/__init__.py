"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Flashcard and User
- Value Objects: identifiers, the Tech/Difficulty enumerations, list filters
"""
