"""Site content API schemas (hero slides, testimonials, about, weddings, hero extension)."""

from datetime import datetime

from pydantic import Field

from venuehub.domain.enums import EntityStatus, HeroImageType
from venuehub.schemas.common import CamelModel


class _Timestamps(CamelModel):
    created_on: datetime | None = None
    updated_on: datetime | None = None


# ---- Hero slides ----


class HeroSlideCreateRequest(CamelModel):
    heading: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    subtext: str | None = None
    cta: str | None = None
    status: EntityStatus = EntityStatus.ACTIVE


class HeroSlideUpdateRequest(CamelModel):
    heading: str | None = Field(default=None, min_length=1)
    image: str | None = Field(default=None, min_length=1)
    subtext: str | None = None
    cta: str | None = None
    status: EntityStatus | None = None


class HeroSlideResponse(_Timestamps):
    id: str
    heading: str
    image: str
    subtext: str | None = None
    cta: str | None = None
    status: str


# ---- Testimonials ----


class TestimonialCreateRequest(CamelModel):
    name: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    images: list[str] = Field(..., min_length=1)
    story_url: str | None = None
    status: EntityStatus = EntityStatus.ACTIVE
    order: int = Field(default=0, ge=0)


class TestimonialUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    text: str | None = Field(default=None, min_length=1)
    images: list[str] | None = Field(default=None, min_length=1)
    story_url: str | None = None
    status: EntityStatus | None = None
    order: int | None = Field(default=None, ge=0)


class TestimonialResponse(_Timestamps):
    id: str
    name: str
    text: str
    images: list[str]
    story_url: str | None = None
    status: str
    order: int


# ---- About content and process steps ----


class AboutContentCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    subtitle: str | None = None
    image: str | None = None
    button_text: str | None = None
    button_link: str | None = None
    status: EntityStatus = EntityStatus.ACTIVE


class AboutContentUpdateRequest(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    subtitle: str | None = None
    image: str | None = None
    button_text: str | None = None
    button_link: str | None = None
    status: EntityStatus | None = None


class AboutContentResponse(_Timestamps):
    id: str
    title: str
    subtitle: str | None = None
    description: str
    image: str | None = None
    button_text: str | None = None
    button_link: str | None = None
    status: str


class ProcessStepCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    icon: str | None = None
    bg_color: str | None = None
    title_color: str | None = None
    order: int = Field(default=1, ge=0)
    status: EntityStatus = EntityStatus.ACTIVE


class ProcessStepUpdateRequest(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    icon: str | None = None
    bg_color: str | None = None
    title_color: str | None = None
    order: int | None = Field(default=None, ge=0)
    status: EntityStatus | None = None


class ProcessStepResponse(_Timestamps):
    id: str
    icon: str | None = None
    title: str
    description: str
    bg_color: str | None = None
    title_color: str | None = None
    order: int
    status: str


# ---- Weddings ----


class WeddingImagesIn(CamelModel):
    main: str = Field(..., min_length=1)
    thumbnail1: str | None = None
    thumbnail2: str | None = None
    gallery: list[str] = Field(default_factory=list)


class WeddingImagesOut(CamelModel):
    main: str
    thumbnail1: str | None = None
    thumbnail2: str | None = None
    gallery: list[str] = Field(default_factory=list)


class WeddingCreateRequest(CamelModel):
    couple_names: str = Field(..., min_length=1)
    images: WeddingImagesIn
    location: str | None = None
    photo_count: int | None = Field(default=None, ge=0)
    wedding_date: str | None = None
    theme: str | None = None
    description: str | None = None
    status: EntityStatus = EntityStatus.ACTIVE


class WeddingUpdateRequest(CamelModel):
    couple_names: str | None = Field(default=None, min_length=1)
    images: WeddingImagesIn | None = None
    location: str | None = None
    photo_count: int | None = Field(default=None, ge=0)
    wedding_date: str | None = None
    theme: str | None = None
    description: str | None = None
    status: EntityStatus | None = None


class WeddingResponse(_Timestamps):
    id: str
    couple_names: str
    location: str | None = None
    photo_count: int | None = None
    wedding_date: str | None = None
    theme: str | None = None
    description: str | None = None
    images: WeddingImagesOut
    status: str


# ---- Hero extension ----


class HeroImageCreateRequest(CamelModel):
    type: HeroImageType
    image_url: str = Field(..., min_length=1)
    alt_text: str = Field(..., min_length=1)
    order: int = Field(default=0, ge=0)
    status: EntityStatus = EntityStatus.ACTIVE


class HeroImageUpdateRequest(CamelModel):
    type: HeroImageType | None = None
    image_url: str | None = Field(default=None, min_length=1)
    alt_text: str | None = Field(default=None, min_length=1)
    order: int | None = Field(default=None, ge=0)
    status: EntityStatus | None = None


class HeroImageResponse(_Timestamps):
    id: str
    type: str
    image_url: str
    alt_text: str
    order: int
    status: str


class HeroContentRequest(CamelModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    button_text: str | None = None
    button_link: str | None = None


class HeroContentResponse(_Timestamps):
    id: str
    title: str
    subtitle: str
    button_text: str | None = None
    button_link: str | None = None
