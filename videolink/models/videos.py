"""
Video Models — Pydantic schemas for catalog video records.

VideoRecord parses the catalog API's GET /api/v1/videos/{id} payload,
accepting both the camelCase and snake_case field spellings the
catalog has shipped. VideoResponse is the JSON view served to the
client-rendered landing page.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from videolink.core.config import BRAND_NAME

DEFAULT_SELLER_NAME = "Seller"

# camelCase key first, snake_case fallback
_SPELLING_PAIRS = (
    ("thumbnailUrl", "thumbnail_url"),
    ("videoUrl", "video_url"),
    ("userName", "user_name"),
)


def default_caption() -> str:
    return f"Product on {BRAND_NAME}"


class VideoRecord(BaseModel):
    """A product video as returned by the catalog API."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    id: str = ""
    caption: str = Field(default_factory=default_caption)
    thumbnail_url: str = Field(
        default="",
        validation_alias=AliasChoices("thumbnailUrl", "thumbnail_url"),
    )
    video_url: str = Field(
        default="",
        validation_alias=AliasChoices("videoUrl", "video_url"),
    )
    price: Union[int, float] = 0
    user_name: str = Field(
        default=DEFAULT_SELLER_NAME,
        validation_alias=AliasChoices("userName", "user_name"),
    )

    @model_validator(mode="before")
    @classmethod
    def merge_spellings(cls, data: object) -> object:
        """Take the first non-empty value of each camelCase / snake_case pair."""
        if not isinstance(data, dict):
            return data
        merged = dict(data)
        for camel, snake in _SPELLING_PAIRS:
            if camel not in merged and snake not in merged:
                continue
            camel_value = merged.pop(camel, None)
            snake_value = merged.pop(snake, None)
            merged[snake] = camel_value or snake_value
        return merged

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> str:
        # Some catalog deployments return numeric ids
        if v is None:
            return ""
        return str(v)

    @field_validator("caption", mode="before")
    @classmethod
    def default_empty_caption(cls, v: Optional[str]) -> str:
        return v or default_caption()

    @field_validator("user_name", mode="before")
    @classmethod
    def default_empty_seller(cls, v: Optional[str]) -> str:
        return v or DEFAULT_SELLER_NAME

    @field_validator("thumbnail_url", "video_url", mode="before")
    @classmethod
    def default_empty_url(cls, v: Optional[str]) -> str:
        return v or ""

    @field_validator("price", mode="before")
    @classmethod
    def default_missing_price(cls, v: object) -> object:
        return 0 if v is None else v

    @field_validator("price")
    @classmethod
    def validate_non_negative(cls, v: Union[int, float]) -> Union[int, float]:
        if v < 0:
            raise ValueError("price must not be negative")
        return v


class VideoResponse(BaseModel):
    """
    Response for GET /api/v1/videos/{video_id}.

    Keys are camelCase so the browser script can use them unchanged.
    """

    id: str
    caption: str
    thumbnailUrl: str
    videoUrl: str
    price: Union[int, float]
    userName: str
    formattedPrice: str
    appUrl: str
    shareUrl: str
