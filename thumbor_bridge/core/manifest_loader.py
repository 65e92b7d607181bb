import os
import json
from typing import Dict, List
from thumbor_bridge.models.data_models import PresetManifest, SizePreset


def load_manifests(directory: str) -> Dict[str, PresetManifest]:
    manifests = {}
    for filename in sorted(os.listdir(directory)):
        if filename.endswith(".json"):
            with open(os.path.join(directory, filename), "r") as file:
                manifest_data = json.load(file)
                manifest = PresetManifest(**manifest_data)
                if (
                    manifest.name in manifests
                    and manifest.version <= manifests[manifest.name].version
                ):
                    continue
                manifests[manifest.name] = manifest
    return manifests


def load_presets(directory: str) -> List[SizePreset]:
    presets = []
    for manifest in load_manifests(directory).values():
        presets.extend(manifest.sizes)
    return presets
