from pydantic import BaseModel, ConfigDict
from typing import Optional

UNSIGNED_TOKEN = "unsafe"


class Asset(BaseModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[int] = None
    format: Optional[str] = None

    @property
    def dimensions(self):
        if self.width is None or self.height is None:
            return None
        return self.width, self.height


class SignedURL(BaseModel):
    model_config = ConfigDict(frozen=True)

    server_base: str
    path: str
    signature: Optional[str] = None

    def __str__(self):
        return f"{self.server_base}/{self.signature or UNSIGNED_TOKEN}/{self.path}"


class DownsizedImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    width: Optional[int]
    height: Optional[int]
    crop: bool
