from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Optional

RESERVED_OPTIONS = frozenset({"fit", "crop", "format", "smart_crop", "smart"})


class TransformMode(str, Enum):
    FIT = "fit"
    CROP = "crop"


class TransformSpec(BaseModel):
    """What to ask Thumbor for: one source image and its transformation.

    ``extra_options`` keeps insertion order; it is rendered after the
    resize, smart and format segments.
    """

    model_config = ConfigDict(frozen=True)

    source_url: str
    mode: TransformMode = TransformMode.FIT
    width: Optional[int] = Field(default=None, ge=0)
    height: Optional[int] = Field(default=None, ge=0)
    format: Optional[str] = None
    smart_crop: bool = False
    extra_options: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _no_reserved_options(self):
        clashes = RESERVED_OPTIONS.intersection(self.extra_options)
        if clashes:
            raise ValueError(
                f"extra_options may not set {', '.join(sorted(clashes))}"
            )
        return self

    @property
    def has_dimensions(self) -> bool:
        return bool(self.width or self.height)


class SizePreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    width: Optional[int] = Field(default=None, ge=0)
    height: Optional[int] = Field(default=None, ge=0)
    crop: bool = False


class PresetManifest(BaseModel):
    version: int
    name: str
    sizes: List[SizePreset]
