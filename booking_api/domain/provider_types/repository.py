"""Provider type repository - Database operations for provider types"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Provider, ProviderType


class ProviderTypeRepository:
    """Repository for provider type database operations"""

    @staticmethod
    def _with_provider_count(db: Session):
        return (
            db.query(ProviderType, func.count(Provider.id))
            .outerjoin(Provider, Provider.provider_type_id == ProviderType.id)
            .group_by(ProviderType.id)
        )

    @staticmethod
    def get_by_id(db: Session, provider_type_id: str) -> Optional[ProviderType]:
        return db.query(ProviderType).filter(ProviderType.id == provider_type_id).first()

    @staticmethod
    def get_with_provider_count(
        db: Session, provider_type_id: str
    ) -> Optional[tuple[ProviderType, int]]:
        """Get a provider type together with the number of providers using it"""
        row = (
            ProviderTypeRepository._with_provider_count(db)
            .filter(ProviderType.id == provider_type_id)
            .first()
        )
        if row is None:
            return None
        return row[0], int(row[1])

    @staticmethod
    def list_for_tenant(db: Session, tenant_id: str) -> list[tuple[ProviderType, int]]:
        rows = (
            ProviderTypeRepository._with_provider_count(db)
            .filter(ProviderType.tenant_id == tenant_id)
            .order_by(ProviderType.display_order.asc(), ProviderType.created_at.desc())
            .all()
        )
        return [(provider_type, int(count)) for provider_type, count in rows]

    @staticmethod
    def slug_exists(db: Session, tenant_id: str, slug: str) -> bool:
        return (
            db.query(ProviderType.id)
            .filter(ProviderType.tenant_id == tenant_id, ProviderType.slug == slug)
            .first()
            is not None
        )

    @staticmethod
    def create(db: Session, tenant_id: str, **data) -> ProviderType:
        provider_type = ProviderType(tenant_id=tenant_id, **data)
        db.add(provider_type)
        db.commit()
        db.refresh(provider_type)
        return provider_type

    @staticmethod
    def update(db: Session, provider_type: ProviderType, **updates) -> ProviderType:
        """Write every supplied field, including explicit None"""
        for key, value in updates.items():
            setattr(provider_type, key, value)

        db.commit()
        db.refresh(provider_type)
        return provider_type

    @staticmethod
    def delete(db: Session, provider_type: ProviderType) -> None:
        db.delete(provider_type)
        db.commit()
