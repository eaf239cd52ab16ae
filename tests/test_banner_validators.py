"""
Unit tests for banner field validators and the payload validator.
"""
import math

import pytest

from app.services.banner.validators import (
    ALLOWED_IMAGE_MIMES,
    BannerPayload,
    SUBTITLE_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    validate_image_metadata,
    validate_image_ref,
    validate_payload,
    validate_subtitle,
    validate_title,
)
from app.services.exceptions import ContentErrorCode, ValidationError

VALID_IMAGE = {"id": 1, "url": "/x.png", "mime": "image/png"}


class TestValidateTitle:
    """Tests for validate_title."""

    @pytest.mark.parametrize("raw", ["Hello", "  Hello  ", "\tWelcome to SONA\n", "a" * TITLE_MAX_LENGTH])
    def test_returns_trimmed_title(self, raw):
        assert validate_title(raw) == raw.strip()

    def test_padding_does_not_count_toward_length(self):
        raw = "   " + "a" * TITLE_MAX_LENGTH + "   "
        assert validate_title(raw) == "a" * TITLE_MAX_LENGTH

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t "])
    def test_empty_after_trim_fails(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            validate_title(raw)
        assert exc_info.value.reason == "empty"
        assert exc_info.value.field == "bannerTitle"

    def test_too_long_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_title("a" * (TITLE_MAX_LENGTH + 1))
        assert "too long" in exc_info.value.message

    @pytest.mark.parametrize("raw", [None, 42, ["title"], {"title": "x"}])
    def test_non_string_fails(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            validate_title(raw)
        assert exc_info.value.reason == "not a string"

    def test_error_is_user_correctable(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_title("")
        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == ContentErrorCode.VALIDATION_ERROR
        assert str(exc_info.value) == "bannerTitle: empty"


class TestValidateSubtitle:
    """Tests for validate_subtitle."""

    def test_none_is_no_subtitle(self):
        assert validate_subtitle(None) is None

    @pytest.mark.parametrize("raw", ["", "   ", "\n"])
    def test_blank_is_no_subtitle(self, raw):
        assert validate_subtitle(raw) is None

    def test_returns_trimmed_subtitle(self):
        assert validate_subtitle("  Pioneering Education  ") == "Pioneering Education"

    def test_max_length_allowed(self):
        raw = "b" * SUBTITLE_MAX_LENGTH
        assert validate_subtitle(raw) == raw

    def test_too_long_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_subtitle("b" * (SUBTITLE_MAX_LENGTH + 1))
        assert "too long" in exc_info.value.message
        assert exc_info.value.field == "bannerSubtitle"

    @pytest.mark.parametrize("raw", [0, False, ["x"]])
    def test_non_string_fails(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            validate_subtitle(raw)
        assert exc_info.value.reason == "not a string"


class TestValidateImageRef:
    """Tests for validate_image_ref."""

    @pytest.mark.parametrize("mime", sorted(ALLOWED_IMAGE_MIMES))
    def test_allowed_mimes_pass(self, mime):
        assert validate_image_ref({**VALID_IMAGE, "mime": mime}) is None

    def test_integral_float_id_passes(self):
        validate_image_ref({**VALID_IMAGE, "id": 7.0})

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing_image_fails(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_ref(raw)
        assert exc_info.value.reason == "missing"

    def test_non_object_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_ref(12)
        assert exc_info.value.reason == "not an object"

    def test_empty_object_fails_on_id(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_ref({})
        assert exc_info.value.field == "bannerImage.id"

    @pytest.mark.parametrize("bad_id", ["1", None, True, 1.5, math.nan, math.inf, -math.inf])
    def test_non_integral_id_fails(self, bad_id):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_ref({**VALID_IMAGE, "id": bad_id})
        assert exc_info.value.field == "bannerImage.id"

    @pytest.mark.parametrize("bad_url", [None, 5, ""])
    def test_invalid_url_fails(self, bad_url):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_ref({**VALID_IMAGE, "url": bad_url})
        assert exc_info.value.field == "bannerImage.url"

    def test_missing_mime_fails(self):
        image = {"id": 1, "url": "/x.png"}
        with pytest.raises(ValidationError) as exc_info:
            validate_image_ref(image)
        assert exc_info.value.field == "bannerImage.mime"
        assert "unsupported" not in exc_info.value.message

    def test_unsupported_mime_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_ref({**VALID_IMAGE, "mime": "application/pdf"})
        assert "unsupported mime" in exc_info.value.message
        assert "application/pdf" in exc_info.value.message


class TestValidateImageMetadata:
    """Tests for the display metadata check."""

    def test_complete_image_passes(self):
        assert validate_image_metadata({**VALID_IMAGE, "size": 120.5}) is True

    def test_missing_size_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_metadata(VALID_IMAGE)
        assert exc_info.value.field == "bannerImage.size"

    def test_reports_first_missing_property_only(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_image_metadata({"mime": "image/png"})
        assert exc_info.value.field == "bannerImage.id"


class TestValidatePayload:
    """Tests for validate_payload."""

    def test_valid_payload(self):
        image = dict(VALID_IMAGE)
        payload = validate_payload({"title": "  Welcome  ", "subtitle": "  Sub ", "image": image})

        assert isinstance(payload, BannerPayload)
        assert payload.title == "Welcome"
        assert payload.subtitle == "Sub"
        assert payload.image is image

    def test_image_is_not_modified(self):
        image = {**VALID_IMAGE, "name": "<banner>.png"}
        payload = validate_payload({"title": "T", "image": image})
        assert payload.image == {**VALID_IMAGE, "name": "<banner>.png"}

    def test_missing_subtitle_becomes_none(self):
        payload = validate_payload({"title": "T", "image": VALID_IMAGE})
        assert payload.subtitle is None

    @pytest.mark.parametrize("raw", [None, "title", 3, ["title"]])
    def test_non_object_fails(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(raw)
        assert exc_info.value.reason == "not an object"

    def test_first_failure_wins(self):
        # Title, subtitle and image are all invalid; title is checked first
        with pytest.raises(ValidationError) as exc_info:
            validate_payload({"title": "", "subtitle": 1, "image": None})
        assert exc_info.value.field == "bannerTitle"

    def test_subtitle_checked_before_image(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload({"title": "T", "subtitle": 1, "image": None})
        assert exc_info.value.field == "bannerSubtitle"

    def test_image_checked_last(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload({"title": "T", "image": {**VALID_IMAGE, "mime": "text/html"}})
        assert "unsupported mime" in exc_info.value.message
