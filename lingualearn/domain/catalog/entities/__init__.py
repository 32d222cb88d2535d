from lingualearn.domain.catalog.entities.flashcard import Flashcard
from lingualearn.domain.catalog.entities.level import Level
from lingualearn.domain.catalog.entities.quiz import Quiz

__all__ = ["Flashcard", "Level", "Quiz"]
