import os

# Must be set before booking_api.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import datetime, time, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from booking_api.database import Base, get_db
from booking_api.main import app
from booking_api.models import (
    Availability,
    Booking,
    Client,
    Provider,
    ProviderType,
    Tenant,
    Trainer,
)
from booking_api.security_utils import create_jwt_token

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def tomorrow_at(hour: int = 12) -> datetime:
    return datetime.combine((datetime.now(timezone.utc) + timedelta(days=1)).date(), time(hour, 0))


def reload(model, record_id):
    """Read a row through a fresh session so nothing is served from an identity map"""
    db = TestingSessionLocal()
    try:
        return db.query(model).filter(model.id == record_id).first()
    finally:
        db.close()


def auth_headers(email: str) -> dict:
    return {"Authorization": f"Bearer {create_jwt_token({'email': email})}"}


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class Factory:
    """Creates committed rows for tests"""

    def __init__(self, db):
        self.db = db

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def tenant(self, slug="acme", name="Acme Fitness", is_active=True) -> Tenant:
        return self._save(
            Tenant(slug=slug, name=name, email=f"hello@{slug}.test", is_active=is_active)
        )

    def provider_type(self, tenant, name="Trainers", slug=None, **kwargs) -> ProviderType:
        return self._save(
            ProviderType(
                tenant_id=tenant.id,
                name=name,
                name_singular=kwargs.pop("name_singular", name.rstrip("s")),
                slug=slug or name.lower(),
                **kwargs,
            )
        )

    def provider(self, tenant, provider_type, name="Jamie Rivera", email="jamie@acme.test") -> Provider:
        return self._save(
            Provider(
                tenant_id=tenant.id,
                provider_type_id=provider_type.id,
                name=name,
                email=email,
                slug=name.lower().replace(" ", "-"),
            )
        )

    def availability(self, provider=None, trainer=None, date=None, start="09:00", end="10:00", current=1):
        return self._save(
            Availability(
                provider_id=provider.id if provider else None,
                trainer_id=trainer.id if trainer else None,
                date=date or tomorrow_at(),
                start_time=start,
                end_time=end,
                current_bookings=current,
            )
        )

    def booking(
        self,
        availability,
        tenant=None,
        provider=None,
        trainer=None,
        client_name="Sam Lee",
        client_email="sam@example.com",
        notes=None,
        status="confirmed",
    ) -> Booking:
        return self._save(
            Booking(
                availability_id=availability.id,
                tenant_id=tenant.id if tenant else None,
                provider_id=provider.id if provider else None,
                trainer_id=trainer.id if trainer else None,
                client_name=client_name,
                client_email=client_email,
                notes=notes,
                status=status,
            )
        )

    def trainer(self, name="Alice", email="alice@example.com", bio="Strength coach") -> Trainer:
        return self._save(Trainer(name=name, email=email, bio=bio))

    def client_record(self, provider, email="sam@example.com", name="Sam Lee", **kwargs) -> Client:
        return self._save(Client(provider_id=provider.id, email=email, name=name, **kwargs))


@pytest.fixture
def factory(db_session):
    return Factory(db_session)
