"""Repository for the row-level policy catalog."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lingualearn.domain.access.policy import Command, Policy, Rule
from lingualearn.infrastructure.common.db_errors import database_errors
from lingualearn.models import RowPolicy as RowPolicyORM


class PolicyRepository:
    """Loads policies written to ``row_policies`` by the migration log."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_all(self) -> list[Policy]:
        stmt = select(RowPolicyORM).order_by(RowPolicyORM.id)
        with database_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [
            Policy(
                name=orm.name,
                table=orm.table_name,
                command=Command(orm.command),
                using=Rule(orm.using_rule) if orm.using_rule else None,
                check=Rule(orm.check_rule) if orm.check_rule else None,
            )
            for orm in orm_models
        ]
