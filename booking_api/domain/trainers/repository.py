"""Trainer repository - Database operations for trainers"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from ...models import Booking, Trainer


class TrainerRepository:
    """Repository for trainer database operations"""

    @staticmethod
    def get_trainers(db: Session) -> list[Trainer]:
        return db.query(Trainer).all()

    @staticmethod
    def get_trainer_by_id(db: Session, trainer_id: str) -> Optional[Trainer]:
        return db.query(Trainer).filter(Trainer.id == trainer_id).first()

    @staticmethod
    def get_trainer_with_schedule(db: Session, trainer_id: str) -> Optional[Trainer]:
        """Get a trainer with availability and bookings (each with its slot) loaded"""
        return (
            db.query(Trainer)
            .options(
                selectinload(Trainer.availability),
                selectinload(Trainer.bookings).joinedload(Booking.availability),
            )
            .filter(Trainer.id == trainer_id)
            .first()
        )

    @staticmethod
    def create_trainer(db: Session, **trainer_data) -> Trainer:
        trainer = Trainer(**trainer_data)
        db.add(trainer)
        db.commit()
        db.refresh(trainer)
        return trainer

    @staticmethod
    def update_trainer(db: Session, trainer: Trainer, **updates) -> Trainer:
        for key, value in updates.items():
            setattr(trainer, key, value)

        db.commit()
        db.refresh(trainer)
        return trainer

    @staticmethod
    def delete_trainer(db: Session, trainer: Trainer) -> None:
        """Delete a trainer; its slots and bookings keep existing with no trainer"""
        db.delete(trainer)
        db.commit()
