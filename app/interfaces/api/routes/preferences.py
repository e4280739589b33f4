"""Routes exposing the user's notification preferences."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.preferences import get_preferences, update_preferences
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, to_http_exception
from app.interfaces.api.schemas import PreferenceRead, PreferenceUpdate

router = APIRouter(prefix="/user/preferences", tags=["preferences"])


@router.get("/", response_model=PreferenceRead)
def read_preferences(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> PreferenceRead:
    try:
        preference = get_preferences(db, current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PreferenceRead.model_validate(preference)


@router.put("/", response_model=PreferenceRead)
def replace_preferences(
    preference_in: PreferenceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> PreferenceRead:
    try:
        preference = update_preferences(
            db,
            current_user.id,
            notify_on_new_event=preference_in.notify_on_new_event,
            notify_on_reminder=preference_in.notify_on_reminder,
            email_enabled=preference_in.email_enabled,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PreferenceRead.model_validate(preference)
