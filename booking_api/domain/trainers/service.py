"""Trainer service - Business logic for trainer operations"""

import logging

from sqlalchemy.orm import Session

from ...errors import NotFoundError
from ...models import Trainer
from .repository import TrainerRepository
from .schemas import TrainerCreate, TrainerPatch

logger = logging.getLogger(__name__)


class TrainerService:
    """Service layer for trainer business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TrainerRepository()

    def get_trainers(self) -> list[Trainer]:
        return self.repo.get_trainers(self.db)

    def get_trainer(self, trainer_id: str) -> Trainer:
        trainer = self.repo.get_trainer_with_schedule(self.db, trainer_id)
        if not trainer:
            raise NotFoundError("Trainer not found")
        return trainer

    def create_trainer(self, data: TrainerCreate) -> Trainer:
        logger.info(f"📥 Creating trainer {data.email}")
        return self.repo.create_trainer(
            self.db,
            name=data.name,
            email=data.email,
            bio=data.bio,
            rate_card=None,
        )

    def update_trainer(self, trainer_id: str, data: TrainerPatch) -> Trainer:
        trainer = self.repo.get_trainer_by_id(self.db, trainer_id)
        if not trainer:
            raise NotFoundError("Trainer not found")

        updates = data.model_dump(include={"name", "email", "bio"}, exclude_unset=True)
        return self.repo.update_trainer(self.db, trainer, **updates)

    def delete_trainer(self, trainer_id: str) -> dict:
        # No dependents check here, unlike provider types
        trainer = self.repo.get_trainer_by_id(self.db, trainer_id)
        if not trainer:
            raise NotFoundError("Trainer not found")

        self.repo.delete_trainer(self.db, trainer)
        logger.info(f"🗑️ Trainer {trainer_id} deleted")
        return {"message": "Trainer deleted successfully"}
