"""
Reusable content component schemas.

Relations (icon badges, programs) are referenced by id; media fields hold
a media object as returned by the upload layer.
"""
from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from app.services.exceptions import ValidationError

Media = Dict[str, Any]


class AchievementItem(BaseModel):
    """content.achievement-item"""
    title: str = Field(..., max_length=120)
    statistic: str = Field(..., max_length=25)
    description: Optional[str] = Field(default=None, max_length=255)
    order: Optional[int] = None


class BulletItem(BaseModel):
    """content.bullet-item: markdown text with an icon badge."""
    text: str = Field(..., description="Markdown content")
    icon: int = Field(..., description="Icon badge id")


class CampusGalleryImage(BaseModel):
    """content.campus-gallery-image"""
    image: Media
    alt_text: Optional[str] = Field(default=None, max_length=120, alias="altText")
    layout_variant: Literal["square", "tall", "wide"] = Field(
        default="square",
        alias="layoutVariant"
    )

    class Config:
        populate_by_name = True


class CampusGalleryColumn(BaseModel):
    """content.campus-gallery-column: exactly two images."""
    images: List[CampusGalleryImage] = Field(..., min_length=2, max_length=2)
    order: int = 0


class PartnershipItem(BaseModel):
    """content.partnership-item"""
    company_name: str = Field(..., alias="companyName")
    company_logo: Media = Field(..., alias="companyLogo")
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")

    class Config:
        populate_by_name = True


class RecognitionItem(BaseModel):
    """content.recognition-item"""
    title: str = Field(..., max_length=120)
    icon: int
    description: Optional[str] = Field(default=None, max_length=255)
    order: int = 0


class TestimonialItem(BaseModel):
    """content.testimonial-item"""
    name: str
    role: str
    quote: str
    rating: int = Field(default=5, ge=1, le=5)
    company: Optional[str] = None
    avatar: Optional[Media] = None


class ValuePropositionItem(BaseModel):
    """content.value-proposition-item"""
    title: str = Field(..., max_length=100)
    description: str = Field(..., description="Markdown content")
    icon: int
    order: int = 0
    title_color: str = Field(default="#fbbf24", max_length=50, alias="titleColor")

    class Config:
        populate_by_name = True


class ProgramSectionComponent(BaseModel):
    """sections.program-section"""
    title: str = Field(..., max_length=255)
    description: Optional[str] = None
    icon: Optional[int] = None
    order: int = 0
    learn_more_text: str = Field(default="Learn More", max_length=100, alias="learnMoreText")
    learn_more_url: Optional[str] = Field(default=None, max_length=500, alias="learnMoreUrl")
    learn_more_is_external: bool = Field(default=False, alias="learnMoreIsExternal")

    class Config:
        populate_by_name = True


COMPONENT_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "content.achievement-item": AchievementItem,
    "content.bullet-item": BulletItem,
    "content.campus-gallery-column": CampusGalleryColumn,
    "content.campus-gallery-image": CampusGalleryImage,
    "content.partnership-item": PartnershipItem,
    "content.recognition-item": RecognitionItem,
    "content.testimonial-item": TestimonialItem,
    "content.value-proposition-item": ValuePropositionItem,
    "sections.program-section": ProgramSectionComponent,
}


def validate_component(uid: str, data: Any) -> BaseModel:
    """
    Parse data as the component registered under uid.

    Raises:
        ValidationError: unknown uid, or the first field that fails
    """
    schema = COMPONENT_SCHEMAS.get(uid)
    if schema is None:
        raise ValidationError("unknown component", field=uid)

    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        field = f"{uid}.{location}" if location else uid
        raise ValidationError(first["msg"], field=field) from exc
