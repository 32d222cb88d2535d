from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lingualearn.application.catalog.use_cases.level_catalog_use_case import LevelCatalogUseCase
from lingualearn.application.catalog.use_cases.list_flashcards_use_case import (
    ListFlashcardsUseCase,
)
from lingualearn.application.progress.use_cases.flashcard_progress_use_case import (
    FlashcardProgressUseCase,
)
from lingualearn.application.progress.use_cases.level_progress_use_case import (
    LevelProgressUseCase,
)
from lingualearn.application.progress.use_cases.quiz_attempt_use_case import QuizAttemptUseCase
from lingualearn.domain.progress.services.level_scoring_service import LevelScoringService
from lingualearn.infrastructure.access import PolicyRepository, RowSecurity
from lingualearn.infrastructure.catalog.repositories import (
    FlashcardRepository,
    LevelRepository,
    QuizRepository,
)
from lingualearn.infrastructure.progress.repositories import (
    QuizAttemptRepository,
    UserLevelRepository,
    UserProgressRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Row-level security over the policy catalog
    policy_repository = providers.Factory(PolicyRepository, db=db)
    row_security = providers.Factory(RowSecurity, policy_repository=policy_repository)

    # Repositories
    flashcard_repository = providers.Factory(FlashcardRepository, db=db, row_security=row_security)
    level_repository = providers.Factory(LevelRepository, db=db, row_security=row_security)
    quiz_repository = providers.Factory(QuizRepository, db=db, row_security=row_security)
    user_progress_repository = providers.Factory(
        UserProgressRepository, db=db, row_security=row_security
    )
    quiz_attempt_repository = providers.Factory(
        QuizAttemptRepository, db=db, row_security=row_security
    )
    user_level_repository = providers.Factory(
        UserLevelRepository, db=db, row_security=row_security
    )

    # Domain services (pure domain logic, no db)
    level_scoring_service = providers.Factory(LevelScoringService)

    # Catalog module use cases
    list_flashcards_use_case = providers.Factory(
        ListFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
    )
    level_catalog_use_case = providers.Factory(
        LevelCatalogUseCase,
        level_repository=level_repository,
        quiz_repository=quiz_repository,
    )

    # Progress module use cases
    flashcard_progress_use_case = providers.Factory(
        FlashcardProgressUseCase,
        progress_repository=user_progress_repository,
        flashcard_repository=flashcard_repository,
    )
    quiz_attempt_use_case = providers.Factory(
        QuizAttemptUseCase,
        quiz_repository=quiz_repository,
        attempt_repository=quiz_attempt_repository,
    )
    level_progress_use_case = providers.Factory(
        LevelProgressUseCase,
        level_repository=level_repository,
        quiz_repository=quiz_repository,
        attempt_repository=quiz_attempt_repository,
        user_level_repository=user_level_repository,
        scoring_service=level_scoring_service,
    )


# Initialize container
container = Container()
