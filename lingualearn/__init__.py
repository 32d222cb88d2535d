"""LinguaLearn: vocabulary flashcards and quizzes with row-level access control."""

__version__ = "0.1.0"
