"""SQLAlchemy implementation of AccountRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from networth.core.timezone import now_utc
from networth.domain.models import Account
from networth.repositories.sqlalchemy.orm_models import AccountORM


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            account_id=account.account_id,
            name=account.name,
            account_type=account.account_type,
            institution=account.institution,
            currency=account.currency,
            created_at=account.created_at or now_utc(),
        )
        self._db.add(orm_account)
        self._db.commit()
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account by ID."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.account_id == account_id
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def get_by_name(self, name: str) -> Optional[Account]:
        """Retrieve account by name."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.name == name
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def list_all(self) -> list[Account]:
        """List all accounts."""
        orm_accounts = self._db.query(AccountORM).order_by(AccountORM.name).all()
        return [self._to_domain(a) for a in orm_accounts]

    def delete(self, account_id: str) -> None:
        """Delete an account; its transactions go with it."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.account_id == account_id
        ).first()
        if orm_account:
            self._db.delete(orm_account)
            self._db.commit()

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            account_id=orm.account_id,
            name=orm.name,
            account_type=orm.account_type,
            institution=orm.institution,
            currency=orm.currency,
            created_at=orm.created_at,
        )
