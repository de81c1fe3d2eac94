"""
Helpers for the DELETE endpoint every collection exposes.
"""

from fastapi import Query

from rest_api.services.base_service import BaseCRUDService
from rest_api.services.deletion import DeleteType
from shared.utils.schemas import DeleteOutput


def get_delete_type(
    strategy: DeleteType = Query(
        default=DeleteType.LOGICAL,
        description="logical marks the row inactive, permanent removes it",
    ),
) -> DeleteType:
    """FastAPI dependency reading ?strategy=. Unknown values are rejected with 422."""
    return strategy


def delete_with_strategy(
    service: BaseCRUDService,
    entity_id: int,
    delete_type: DeleteType,
) -> DeleteOutput:
    """Run the delete through the service and describe the outcome."""
    service.delete(entity_id, delete_type)
    verb = "eliminado permanentemente" if delete_type == DeleteType.PERMANENT else "desactivado"
    return DeleteOutput(
        success=True,
        message=f"{service.entity_name} con ID {entity_id} {verb}",
        strategy=delete_type.value,
        entity_id=entity_id,
    )
