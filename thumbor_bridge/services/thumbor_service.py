from typing import Any, Dict, Optional, Sequence, Union
from pydantic import ValidationError
from thumbor_bridge.core.abstract_metadata_provider import MetadataProvider
from thumbor_bridge.core.exceptions import InvalidSource, UnknownPreset
from thumbor_bridge.core.logger import get_logger
from thumbor_bridge.core.manifest_loader import load_presets
from thumbor_bridge.core.settings import Settings
from thumbor_bridge.helpers.file_utils import extension_from_url
from thumbor_bridge.helpers.markup import picture_element
from thumbor_bridge.models.data_models import (
    RESERVED_OPTIONS,
    TransformMode,
    TransformSpec,
)
from thumbor_bridge.models.image_metadata import DownsizedImage
from thumbor_bridge.services.in_memory_metadata_provider import (
    InMemoryMetadataProvider,
)
from thumbor_bridge.services.preset_resolver import (
    Registry,
    default_registry,
    resolve_preset,
)
from thumbor_bridge.services.url_builder import build_url

logger = get_logger(__name__)

Size = Union[str, Sequence[int]]


class ThumborService:
    """Entry point for hosts: sizes in, Thumbor URLs out.

    ``get_image`` raises on a bad source URL. The asset based helpers
    (``downsize``, ``srcset``, ``picture``) log the failure and return
    ``None`` instead so the caller can keep the original image.
    """

    def __init__(
        self,
        settings: Settings,
        registry: Optional[Registry] = None,
        provider: Optional[MetadataProvider] = None,
    ):
        self.settings = settings
        if registry is None:
            extra = (
                load_presets(settings.presets_dir)
                if settings.presets_dir
                else None
            )
            registry = default_registry(settings, extra)
        self.registry = registry
        self.provider = provider or InMemoryMetadataProvider()

    def get_image(
        self,
        image_url: str,
        width: int = 0,
        height: int = 0,
        crop: bool = False,
        extra: Optional[Dict[str, Any]] = None,
    ) -> str:
        options = dict(extra or {})
        image_format = options.pop("format", None) or extension_from_url(
            image_url or ""
        )
        smart_crop = options.pop("smart_crop", self.settings.smart_crop)
        # Resize mode and dimensions come from the arguments only
        for key in RESERVED_OPTIONS:
            options.pop(key, None)

        spec = TransformSpec(
            source_url=image_url,
            mode=TransformMode.CROP if crop else TransformMode.FIT,
            width=width or None,
            height=height or None,
            format=image_format or None,
            smart_crop=smart_crop,
            extra_options=options,
        )
        return build_url(spec, self.settings.server, self.settings.secret_key)

    def downsize(
        self, asset_id: str, size: Size, image_format: Optional[str] = None
    ) -> Optional[DownsizedImage]:
        asset = self.provider.get_asset(asset_id)
        if asset is None:
            logger.warning("No metadata for asset %s", asset_id)
            return None

        if isinstance(size, (list, tuple)) and not any(size[:2]):
            return None

        try:
            preset = resolve_preset(size, self.registry, asset.dimensions)
            url = self.get_image(
                asset.url,
                preset.width or 0,
                preset.height or 0,
                preset.crop,
                {"format": image_format} if image_format else None,
            )
        except (UnknownPreset, InvalidSource, ValidationError) as e:
            logger.warning("Keeping original image for %s: %s", asset_id, e)
            return None

        return DownsizedImage(
            url=url, width=preset.width, height=preset.height, crop=preset.crop
        )

    def srcset(
        self, asset_id: str, image_format: Optional[str] = None
    ) -> Optional[str]:
        asset = self.provider.get_asset(asset_id)
        if asset is None:
            return None

        # Later presets win a shared width
        by_width = {}
        for name in self.registry:
            preset = resolve_preset(name, self.registry, asset.dimensions)
            if preset.width:
                by_width[preset.width] = preset

        candidates = {}
        for width, preset in by_width.items():
            try:
                candidates[width] = self.get_image(
                    asset.url,
                    preset.width,
                    preset.height or 0,
                    preset.crop,
                    {"format": image_format} if image_format else None,
                )
            except InvalidSource as e:
                logger.warning("No srcset for %s: %s", asset_id, e)
                return None

        return ", ".join(
            f"{candidates[width]} {width}w" for width in sorted(candidates)
        )

    def picture(
        self,
        asset_id: str,
        size: Size,
        alt: str = "",
        css_class: str = "",
        sizes: str = "",
    ) -> Optional[str]:
        image = self.downsize(asset_id, size)
        if image is None:
            return None

        return picture_element(
            src=image.url,
            width=image.width,
            height=image.height,
            srcset=self.srcset(asset_id) or "",
            sizes=sizes,
            webp_srcset=self.srcset(asset_id, image_format="webp") or "",
            webp_sizes=sizes,
            alt=alt,
            css_class=css_class,
        )
