"""flashdeck: flashcard study service and client."""

__version__ = "0.1.0"
