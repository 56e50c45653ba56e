"""SQLAlchemy-backed user repository."""

from sqlalchemy.orm import Session

from bloglist.models.user import User


class SqlUserRepository:
    """Users stored in the relational database."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def get(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def add(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
