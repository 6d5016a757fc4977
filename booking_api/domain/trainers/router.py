"""Trainer router - FastAPI endpoints for trainer operations"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...errors import AppError, InternalError
from .schemas import TrainerCreate, TrainerDetailResponse, TrainerPatch, TrainerResponse
from .service import TrainerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trainers", tags=["Trainers"])


def get_trainer_service(db: Session = Depends(get_db)) -> TrainerService:
    """Dependency injection for TrainerService"""
    return TrainerService(db)


# ============================================================================
# COLLECTION
# ============================================================================


@router.get("", response_model=list[TrainerResponse])
async def get_trainers(service: TrainerService = Depends(get_trainer_service)):
    """Get all trainers"""
    try:
        trainers = service.get_trainers()
    except Exception as e:
        logger.error(f"❌ Trainers fetch error: {e}")
        raise InternalError("Failed to fetch trainers", details=str(e)) from e

    return [TrainerResponse.from_model(t) for t in trainers]


@router.post("", response_model=TrainerResponse, status_code=201)
async def create_trainer(
    data: TrainerCreate,
    service: TrainerService = Depends(get_trainer_service),
):
    try:
        trainer = service.create_trainer(data)
    except Exception as e:
        logger.error(f"❌ Trainer creation error: {e}")
        raise InternalError("Failed to create trainer", details=str(e)) from e

    return TrainerResponse.from_model(trainer)


# ============================================================================
# SINGLE TRAINER
# ============================================================================


@router.get("/{trainer_id}", response_model=TrainerDetailResponse)
async def get_trainer(
    trainer_id: str,
    service: TrainerService = Depends(get_trainer_service),
):
    """Get a trainer with availability and bookings"""
    try:
        trainer = service.get_trainer(trainer_id)
        return TrainerDetailResponse.from_model(trainer)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Trainer fetch error: {e}")
        raise InternalError("Failed to fetch trainer", details=str(e)) from e


@router.patch("/{trainer_id}", response_model=TrainerResponse)
async def update_trainer(
    trainer_id: str,
    data: TrainerPatch,
    service: TrainerService = Depends(get_trainer_service),
):
    try:
        trainer = service.update_trainer(trainer_id, data)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Trainer update error: {e}")
        raise InternalError("Failed to update trainer", details=str(e)) from e

    return TrainerResponse.from_model(trainer)


@router.delete("/{trainer_id}")
async def delete_trainer(
    trainer_id: str,
    service: TrainerService = Depends(get_trainer_service),
):
    try:
        return service.delete_trainer(trainer_id)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Trainer deletion error: {e}")
        raise InternalError("Failed to delete trainer", details=str(e)) from e
