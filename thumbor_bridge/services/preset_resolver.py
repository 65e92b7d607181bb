from typing import Dict, Iterable, Optional, Sequence, Tuple, Union
from thumbor_bridge.core.exceptions import UnknownPreset
from thumbor_bridge.core.settings import Settings
from thumbor_bridge.models.data_models import SizePreset

FULL = "full"
CUSTOM = "custom"

Registry = Dict[str, SizePreset]
Dimensions = Tuple[int, int]


def default_registry(
    settings: Settings, extra: Optional[Iterable[SizePreset]] = None
) -> Registry:
    registry = {
        "thumbnail": SizePreset(
            name="thumbnail",
            width=settings.thumbnail_width,
            height=settings.thumbnail_height,
            crop=settings.thumbnail_crop,
        ),
        "medium": SizePreset(
            name="medium",
            width=settings.medium_width,
            height=settings.medium_height,
        ),
        "large": SizePreset(
            name="large",
            width=settings.large_width,
            height=settings.large_height,
        ),
        FULL: SizePreset(name=FULL),
    }
    for preset in extra or ():
        registry[preset.name] = preset
    return registry


def _smaller(preset_dim, original_dim):
    if preset_dim is None:
        return None
    return min(preset_dim, original_dim)


def _clamp(preset: SizePreset, original_dimensions: Optional[Dimensions]):
    # Never upscale past the source; unknown source size means no clamp
    if preset.crop or original_dimensions is None:
        return preset
    original_width, original_height = original_dimensions
    return preset.model_copy(
        update={
            "width": _smaller(preset.width, original_width),
            "height": _smaller(preset.height, original_height),
        }
    )


def resolve_preset(
    name: Union[str, Sequence[int]],
    registry: Registry,
    original_dimensions: Optional[Dimensions] = None,
) -> SizePreset:
    """Turn a size name, or a ``(width, height)`` pair, into concrete
    dimensions for one asset.

    ``full`` always reports the asset's own size when it is known.
    Non-cropped presets are clamped to the original dimensions; cropped
    presets are returned untouched.
    """
    if isinstance(name, (list, tuple)):
        width = int(name[0]) if len(name) > 0 and name[0] else 0
        height = int(name[1]) if len(name) > 1 and name[1] else 0
        preset = SizePreset(name=CUSTOM, width=width, height=height)
        return _clamp(preset, original_dimensions)

    if name == FULL and original_dimensions is not None:
        width, height = original_dimensions
        return SizePreset(name=FULL, width=width, height=height, crop=False)

    if name not in registry:
        raise UnknownPreset(name)

    return _clamp(registry[name], original_dimensions)
