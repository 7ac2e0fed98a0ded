"""SQLAlchemy-backed user repository."""

from typing import Optional
from sqlalchemy.exc import IntegrityError
from storage.entity.user import UserEntity
from storage.entity.dto import User, UserPatch
from storage.database.base import get_db
from storage.errors import EmailExists
from .base import UserRepository


def _entity_to_dto(entity: UserEntity) -> User:
    return User(
        user_id=entity.user_id,
        email=entity.email,
        username=entity.username,
        password_hash=entity.password_hash,
        role=entity.role,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


class SqlUserRepository(UserRepository):
    def create_user(self, user: User) -> User:
        with get_db() as session:
            entity = UserEntity(
                user_id=user.user_id,
                email=user.email,
                username=user.username,
                password_hash=user.password_hash,
                role=user.role,
            )
            session.add(entity)
            try:
                session.flush()
            except IntegrityError as e:
                raise EmailExists() from e
            return _entity_to_dto(entity)

    def get_user(self, user_id: str) -> Optional[User]:
        with get_db() as session:
            row = session.get(UserEntity, user_id)
            return _entity_to_dto(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        with get_db() as session:
            row = session.query(UserEntity).filter_by(email=email).first()
            return _entity_to_dto(row) if row else None

    def update_user(self, user_id: str, patch: UserPatch) -> Optional[User]:
        with get_db() as session:
            entity = session.get(UserEntity, user_id)
            if not entity:
                return None
            patch.apply_to(entity)
            session.flush()
            return _entity_to_dto(entity)
