"""
SQLAlchemy Implementation of Person Repository.
"""

from sqlalchemy.orm import Session

from synergia.domain.models.person import Person
from synergia.domain.schemas.person import PersonRead
from synergia.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyPersonRepository(SQLAlchemyRepository[Person, PersonRead]):
    read_schema = PersonRead

    def __init__(self, db: Session, autocommit: bool = True):
        super().__init__(db, Person, autocommit)
