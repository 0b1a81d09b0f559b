"""Saved preference endpoints."""
from fastapi import APIRouter, Depends
from punchsync.api.deps import get_preferences_service
from punchsync.api.schemas.preferences import PreferencesRead, PreferencesUpdate
from punchsync.services.preferences_service import PreferencesService

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=PreferencesRead)
def get_preferences(
    service: PreferencesService = Depends(get_preferences_service),
) -> PreferencesRead:
    return service.load()


@router.put("", response_model=PreferencesRead)
def update_preferences(
    payload: PreferencesUpdate,
    service: PreferencesService = Depends(get_preferences_service),
) -> PreferencesRead:
    return service.save(payload)
