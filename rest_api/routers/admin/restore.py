"""
Entity restoration endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rest_api.services.restore import get_service_for
from shared.infrastructure.db import get_db
from shared.utils.schemas import RestoreOutput


router = APIRouter(tags=["admin-restore"])


@router.post("/{entity_type}/{entity_id}/restore", response_model=RestoreOutput)
def restore_deleted_entity(
    entity_type: str,
    entity_id: int,
    db: Session = Depends(get_db),
) -> RestoreOutput:
    """
    Restore a logically deleted entity.

    entity_type is the collection name used in the API paths, for example
    roles, role-users, event-sessions or cards. Restoring an active row
    answers 409.
    """
    service = get_service_for(entity_type, db)
    service.restore(entity_id)

    return RestoreOutput(
        success=True,
        message=f"{service.entity_name} con ID {entity_id} restaurado",
        entity_type=entity_type,
        entity_id=entity_id,
    )
