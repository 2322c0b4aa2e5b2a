"""Object graph for the server.

Repositories and use cases are built per request around the request's
session; the hashing and token services are shared.
"""

from dependency_injector import containers, providers

from flashdeck.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from flashdeck.application.identity.use_cases.seed_admin_user_use_case import (
    SeedAdminUserUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from flashdeck.database import current_session
from flashdeck.infrastructure.identity.repositories.user_repository import UserRepository
from flashdeck.infrastructure.identity.services import PasswordService, TokenService
from flashdeck.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)


class Container(containers.DeclarativeContainer):
    # Whatever session bound_session() made current: the request's, or the seed script's
    db = providers.Callable(current_session)

    password_service = providers.Singleton(PasswordService)
    token_service = providers.Singleton(TokenService)

    flashcards = providers.Factory(FlashcardRepository, db=db)
    users = providers.Factory(UserRepository, db=db)

    flashcard_use_case = providers.Factory(FlashcardUseCase, flashcard_repository=flashcards)
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=users,
        password_service=password_service,
        token_service=token_service,
    )
    seed_admin_user_use_case = providers.Factory(
        SeedAdminUserUseCase, user_repository=users, password_service=password_service
    )


container = Container()
