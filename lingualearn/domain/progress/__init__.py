"""
Progress bounded context - Domain layer.

Per-user rows, owned by and only mutable by the identity they reference:
- UserProgress: which flashcards a user knows
- QuizAttempt: append-only log of quiz answers
- UserLevel: a user's result for a level
"""
