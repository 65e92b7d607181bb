from abc import ABC, abstractmethod
from typing import Optional
from thumbor_bridge.models.image_metadata import Asset


class MetadataProvider(ABC):
    @abstractmethod
    def get_asset(self, asset_id: str) -> Optional[Asset]:
        pass

    @abstractmethod
    def register(self, asset_id: str, asset: Asset):
        pass
