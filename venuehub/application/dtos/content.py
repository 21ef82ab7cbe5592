"""DTOs for site content kinds (read-models returned by repositories)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HeroSlideResult:
    """Hero slide read-model."""

    id: str
    heading: str
    image: str
    subtext: str | None
    cta: str | None
    status: str
    created_on: datetime | None
    updated_on: datetime | None


@dataclass(frozen=True)
class TestimonialResult:
    """Testimonial read-model; lower order shows first."""

    id: str
    name: str
    text: str
    images: tuple[str, ...]
    story_url: str | None
    status: str
    order: int
    created_on: datetime | None
    updated_on: datetime | None


@dataclass(frozen=True)
class AboutContentResult:
    id: str
    title: str
    subtitle: str | None
    description: str
    image: str | None
    button_text: str | None
    button_link: str | None
    status: str
    created_on: datetime | None
    updated_on: datetime | None


@dataclass(frozen=True)
class ProcessStepResult:
    id: str
    icon: str | None
    title: str
    description: str
    bg_color: str | None
    title_color: str | None
    order: int
    status: str
    created_on: datetime | None
    updated_on: datetime | None


@dataclass(frozen=True)
class WeddingImages:
    """Image set of a showcased wedding; main is always present."""

    main: str
    thumbnail1: str | None = None
    thumbnail2: str | None = None
    gallery: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WeddingResult:
    id: str
    couple_names: str
    location: str | None
    photo_count: int | None
    wedding_date: str | None
    theme: str | None
    description: str | None
    images: WeddingImages
    status: str
    created_on: datetime | None
    updated_on: datetime | None


@dataclass(frozen=True)
class HeroImageResult:
    """Hero-extension image placed in one layout slot (type)."""

    id: str
    type: str
    image_url: str
    alt_text: str
    order: int
    status: str
    created_on: datetime | None
    updated_on: datetime | None


@dataclass(frozen=True)
class HeroContentResult:
    """The single hero-extension text block."""

    id: str
    title: str
    subtitle: str
    button_text: str | None
    button_link: str | None
    created_on: datetime | None
    updated_on: datetime | None
