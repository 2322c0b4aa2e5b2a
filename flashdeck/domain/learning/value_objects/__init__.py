from .flashcard_filter import FlashcardFilter, TechFilter
from .tech import Difficulty, Tech

__all__ = [
    "Difficulty",
    "FlashcardFilter",
    "Tech",
    "TechFilter",
]
