import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a text primary key"""
    return str(uuid.uuid4())


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=False, default="")
    timezone = Column(String(64), nullable=False, default="UTC")
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    provider_types = relationship("ProviderType", back_populates="tenant")
    providers = relationship("Provider", back_populates="tenant")
    bookings = relationship("Booking", back_populates="tenant")


class ProviderType(Base):
    __tablename__ = "provider_types"

    id = Column(String(36), primary_key=True, default=generate_id)
    tenant_id = Column(
        String(36), ForeignKey("tenants.id", ondelete="CASCADE"), index=True, nullable=False
    )
    name = Column(String(255), nullable=False)  # e.g. "Trainers"
    name_singular = Column(String(255), nullable=False)  # e.g. "Trainer"
    slug = Column(String(255), nullable=False)  # unique within a tenant
    description = Column(Text, nullable=True)
    icon = Column(String(32), nullable=True)
    default_slot_duration = Column(Integer, default=60, nullable=False)  # minutes
    default_slot_capacity = Column(Integer, default=1, nullable=False)
    allow_group_sessions = Column(Boolean, default=False, nullable=False)
    require_approval = Column(Boolean, default=False, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    tenant = relationship("Tenant", back_populates="provider_types")
    providers = relationship("Provider", back_populates="provider_type")


class Provider(Base):
    __tablename__ = "providers"

    id = Column(String(36), primary_key=True, default=generate_id)
    tenant_id = Column(
        String(36), ForeignKey("tenants.id", ondelete="CASCADE"), index=True, nullable=False
    )
    provider_type_id = Column(
        String(36), ForeignKey("provider_types.id", ondelete="CASCADE"), index=True, nullable=False
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    default_hourly_rate = Column(Float, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    tenant = relationship("Tenant", back_populates="providers")
    provider_type = relationship("ProviderType", back_populates="providers")
    availability = relationship("Availability", back_populates="provider")
    bookings = relationship("Booking", back_populates="provider")
    clients = relationship("Client", back_populates="provider")


class Trainer(Base):
    """Legacy single-tenant provider record used by the /trainers endpoints"""

    __tablename__ = "trainers"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    rate_card = Column(JSON, nullable=True)  # unset until the trainer configures pricing
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    availability = relationship(
        "Availability", back_populates="trainer", order_by="Availability.date"
    )
    bookings = relationship("Booking", back_populates="trainer")


class Availability(Base):
    __tablename__ = "availability"

    id = Column(String(36), primary_key=True, default=generate_id)
    provider_id = Column(
        String(36), ForeignKey("providers.id", ondelete="CASCADE"), index=True, nullable=True
    )
    trainer_id = Column(String(36), ForeignKey("trainers.id"), index=True, nullable=True)
    date = Column(DateTime, index=True, nullable=False)  # UTC calendar day of the slot
    start_time = Column(String(5), nullable=False)  # "HH:MM"
    end_time = Column(String(5), nullable=False)  # "HH:MM"
    is_group_session = Column(Boolean, default=False, nullable=False)
    max_capacity = Column(Integer, default=1, nullable=False)
    current_bookings = Column(Integer, default=0, nullable=False)  # live bookings on this slot
    price = Column(Float, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    provider = relationship("Provider", back_populates="availability")
    trainer = relationship("Trainer", back_populates="availability")
    bookings = relationship("Booking", back_populates="availability")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_id)
    tenant_id = Column(
        String(36), ForeignKey("tenants.id", ondelete="CASCADE"), index=True, nullable=True
    )
    availability_id = Column(
        String(36), ForeignKey("availability.id", ondelete="CASCADE"), index=True, nullable=False
    )
    provider_id = Column(
        String(36), ForeignKey("providers.id", ondelete="CASCADE"), index=True, nullable=True
    )
    trainer_id = Column(String(36), ForeignKey("trainers.id"), index=True, nullable=True)
    client_name = Column(String(255), nullable=False)
    client_email = Column(String(255), nullable=False)
    client_phone = Column(String(50), nullable=True)
    party_size = Column(Integer, default=1, nullable=False)
    total_price = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(50), default="confirmed", nullable=False)  # confirmed, cancelled
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    tenant = relationship("Tenant", back_populates="bookings")
    availability = relationship("Availability", back_populates="bookings")
    provider = relationship("Provider", back_populates="bookings")
    trainer = relationship("Trainer", back_populates="bookings")


class Client(Base):
    """An end user with a custom pricing relationship to one provider"""

    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=generate_id)
    provider_id = Column(
        String(36), ForeignKey("providers.id", ondelete="CASCADE"), index=True, nullable=False
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255), index=True, nullable=False)  # stored lower-cased
    phone = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    pricing_table = Column(JSON, nullable=True)  # e.g. [{"partySize": 1, "price": 60}]
    pricing_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    provider = relationship("Provider", back_populates="clients")
