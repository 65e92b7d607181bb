from typing import Dict, Optional
from thumbor_bridge.core.abstract_metadata_provider import MetadataProvider
from thumbor_bridge.helpers.file_utils import (
    detect_extension_from_bytes,
    detect_dims_from_bytes,
)
from thumbor_bridge.models.image_metadata import Asset


class InMemoryMetadataProvider(MetadataProvider):
    def __init__(self, assets: Optional[Dict[str, Asset]] = None):
        self._assets = dict(assets or {})

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        return self._assets.get(asset_id)

    def register(self, asset_id: str, asset: Asset):
        self._assets[asset_id] = asset

    def register_bytes(self, asset_id: str, url: str, data: bytes) -> Asset:
        width, height = detect_dims_from_bytes(data)
        asset = Asset(
            url=url,
            width=width,
            height=height,
            size=len(data),
            format=detect_extension_from_bytes(data),
        )
        self.register(asset_id, asset)
        return asset
