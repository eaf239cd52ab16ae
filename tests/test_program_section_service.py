"""
Tests for ProgramSectionService writes and default population.
"""
from unittest.mock import MagicMock

import pytest

from app.services.exceptions import ValidationError
from app.services.program_sections import ProgramSectionService
from app.services.repository import ContentRepository


@pytest.fixture
def service():
    return ProgramSectionService(ContentRepository())


class TestCreate:

    def test_component_defaults_are_stored(self, service):
        created = service.create({"data": {"title": "Curriculum", "icon": 3}})

        assert created["id"] == 1
        assert created["title"] == "Curriculum"
        assert created["learnMoreText"] == "Learn More"
        assert created["learnMoreIsExternal"] is False
        assert created["order"] == 0
        assert created["icon"] == 3

    def test_program_relation_kept(self, service):
        created = service.create({"data": {"title": "Placements", "program": 7}})
        assert created["program"] == 7

    def test_unknown_keys_dropped(self, service):
        created = service.create({"data": {"title": "Labs", "internalNote": "x"}})
        assert "internalNote" not in created

    def test_missing_title_rejected(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.create({"data": {"order": 1}})
        assert exc_info.value.field == "sections.program-section.title"

    def test_learn_more_text_too_long(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.create({"data": {"title": "T", "learnMoreText": "x" * 101}})
        assert exc_info.value.field.endswith("learnMoreText")

    def test_invalid_component_never_persisted(self):
        repository = MagicMock()
        with pytest.raises(ValidationError):
            ProgramSectionService(repository).create({"data": {"title": 5}})
        repository.create.assert_not_called()

    def test_body_without_data_rejected(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.create({"title": "x"})
        assert exc_info.value.field == "data"


def test_find_uses_default_populate():
    repository = MagicMock()
    repository.find.return_value = []

    ProgramSectionService(repository).find()

    _, params = repository.find.call_args[0]
    assert params["populate"] == {"icon": True, "program": True}
