"""Thumbor URL construction and signing.

A transformation is written as ``/``-separated path segments in a fixed
order (resize, smart, format, then extra options) so the same
``TransformSpec`` and secret always produce the same URL::

    <server>/<signature>/<filters>/<source url>

The signature is an HMAC-SHA1 of ``<filters>/<source url>`` encoded with
URL-safe base64, or ``unsafe`` when no secret is configured.
"""

import base64
import hashlib
import hmac
from typing import List, Optional
from pydantic import AnyUrl, TypeAdapter, ValidationError
from thumbor_bridge.core.exceptions import InvalidSource
from thumbor_bridge.core.logger import get_logger
from thumbor_bridge.models.data_models import TransformSpec
from thumbor_bridge.models.image_metadata import SignedURL

logger = get_logger(__name__)

_url_adapter = TypeAdapter(AnyUrl)


def validate_source_url(source_url: str) -> str:
    if not source_url or not source_url.strip():
        raise InvalidSource(source_url)
    try:
        parsed = _url_adapter.validate_python(source_url)
    except ValidationError as e:
        raise InvalidSource(source_url) from e
    if not parsed.host:
        raise InvalidSource(source_url)
    return source_url


def _option_segment(key, value) -> Optional[str]:
    if value is None or value is False:
        return None
    if value is True:
        return key
    if isinstance(value, (list, tuple)):
        return f"{key}:{','.join(str(item) for item in value)}"
    return f"{key}:{value}"


def filter_segments(spec: TransformSpec) -> List[str]:
    segments = []
    if spec.has_dimensions:
        segments.append(
            f"{spec.mode.value}-{spec.width or 0}x{spec.height or 0}"
        )
    if spec.smart_crop:
        segments.append("smart")
    if spec.format:
        segments.append(spec.format.lstrip(".").lower())
    for key, value in spec.extra_options.items():
        segment = _option_segment(key, value)
        if segment:
            segments.append(segment)
    return segments


def sign(path: str, secret: Optional[str]) -> Optional[str]:
    if not secret:
        return None
    digest = hmac.new(
        secret.encode("utf-8"), path.encode("utf-8"), hashlib.sha1
    ).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def sign_transform(
    spec: TransformSpec, server_base: str, secret: Optional[str] = None
) -> SignedURL:
    source_url = validate_source_url(spec.source_url)
    path = "/".join(filter_segments(spec) + [source_url])
    return SignedURL(
        server_base=server_base.rstrip("/"),
        path=path,
        signature=sign(path, secret),
    )


def build_url(
    spec: TransformSpec, server_base: str, secret: Optional[str] = None
) -> str:
    url = str(sign_transform(spec, server_base, secret))
    logger.debug("Built Thumbor URL %s", url)
    return url
