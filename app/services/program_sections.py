"""
Program-section service.

Reads fall back to populating icon and program when the caller does not
pass populate. Writes are parsed as the sections.program-section component
before they reach the repository.
"""
from typing import Any, Dict, List, Optional

from app.core.logging import get_safe_logger
from app.schemas.components import validate_component
from app.services.institutions import request_data
from app.services.queries import PROGRAM_SECTION_DEFAULT_POPULATE, with_default_populate
from app.services.repository import ContentRepository

logger = get_safe_logger(__name__)

COLLECTION = "program-section"
SECTION_COMPONENT = "sections.program-section"

# Relations stored next to the component fields, not part of the component
SECTION_RELATIONS = ("program",)


class ProgramSectionService:

    def __init__(self, repository: ContentRepository):
        self._repository = repository

    def find(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        params = with_default_populate(params, PROGRAM_SECTION_DEFAULT_POPULATE)
        return self._repository.find(COLLECTION, params)

    def find_one(
        self,
        entity_id: int,
        params: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        params = with_default_populate(params, PROGRAM_SECTION_DEFAULT_POPULATE)
        return self._repository.find_one(COLLECTION, entity_id, params)

    def create(self, body: Any) -> Dict[str, Any]:
        """
        Create a program section from a {"data": {...}} body.

        Component defaults (learnMoreText, order...) are filled in; unknown
        keys are dropped.

        Raises:
            ValidationError: malformed body or a component field fails
        """
        data = request_data(body)
        component_fields = {
            key: value for key, value in data.items() if key not in SECTION_RELATIONS
        }
        section = validate_component(SECTION_COMPONENT, component_fields)

        record = {
            **section.model_dump(by_alias=True),
            **{key: data[key] for key in SECTION_RELATIONS if key in data},
        }
        created = self._repository.create(COLLECTION, record)
        logger.info("Program section created", collection=COLLECTION, entity_id=created["id"])
        return created
