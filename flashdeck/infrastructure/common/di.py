"""Bridge between FastAPI dependencies and the DI container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.database import DatabaseSession, bound_session

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Wrap a container provider as a FastAPI dependency.

    The request's session is current only while the provider builds the
    object graph; the built use case keeps its own reference to it
    afterwards. Nothing shared on the container is modified.
    """

    def build(db: DatabaseSession) -> T:
        with bound_session(db):
            return provider()

    return build
