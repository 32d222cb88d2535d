"""
Catalog bounded context - Domain layer.

Read-only reference data seeded by the migration log:
- Flashcard: a vocabulary word with its translation
- Level: an ordered difficulty tier with a pass mark
- Quiz: a multiple-choice question belonging to a level
"""
