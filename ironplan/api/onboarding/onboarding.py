"""Onboarding API routes.

HTTP boundary for onboarding endpoints. Contains only FastAPI routing logic.
All business logic lives in ironplan.onboarding.service.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from ironplan.api.dependencies.auth import get_current_user_id
from ironplan.db import session as db_session
from ironplan.onboarding.schemas import OnboardingRequest, OnboardingResponse, TrainingProfileSchema
from ironplan.onboarding.service import complete_onboarding, get_profile_record
from ironplan.plans.errors import InsufficientLeadTimeError, InvalidInputError

router = APIRouter(prefix="/api/onboarding", tags=["onboarding"])


@router.post("", response_model=OnboardingResponse)
def submit_onboarding(
    request: OnboardingRequest,
    user_id: str = Depends(get_current_user_id),
) -> OnboardingResponse:
    """Complete onboarding and create the training plan.

    This endpoint:
    1. Stores the training profile
    2. Computes the phase breakdown and plan start date
    3. Generates and persists the first weeks of workouts

    Status codes:
        - 200: Plan created
        - 400: Race less than 12 weeks away, or invalid profile values
        - 401: Missing user identity
        - 422: Malformed payload
    """
    logger.info(f"Onboarding requested for user_id={user_id}")
    try:
        with db_session.get_session() as session:
            return complete_onboarding(session, user_id, request)
    except InsufficientLeadTimeError as e:
        logger.warning(f"Onboarding rejected for user_id={user_id}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except InvalidInputError as e:
        logger.warning(f"Onboarding rejected for user_id={user_id}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error completing onboarding: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error") from e


@router.get("/profile", response_model=TrainingProfileSchema)
def get_profile(user_id: str = Depends(get_current_user_id)) -> TrainingProfileSchema:
    with db_session.get_session() as session:
        record = get_profile_record(session, user_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
        return TrainingProfileSchema.model_validate(record)
