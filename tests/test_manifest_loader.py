import json

from thumbor_bridge.core.manifest_loader import load_manifests, load_presets


def _write(directory, filename, name, version, sizes):
    (directory / filename).write_text(
        json.dumps({"name": name, "version": version, "sizes": sizes})
    )


def test_highest_version_wins(tmp_path):
    _write(tmp_path, "site-v2.json", "site", 2, [{"name": "hero", "width": 1600}])
    _write(tmp_path, "site-v1.json", "site", 1, [{"name": "hero", "width": 800}])
    _write(
        tmp_path,
        "shop.json",
        "shop",
        1,
        [{"name": "product", "width": 600, "height": 600, "crop": True}],
    )
    (tmp_path / "notes.txt").write_text("ignored")

    manifests = load_manifests(str(tmp_path))
    assert set(manifests) == {"site", "shop"}
    assert manifests["site"].version == 2

    presets = {preset.name: preset for preset in load_presets(str(tmp_path))}
    assert presets["hero"].width == 1600
    assert presets["hero"].height is None
    assert presets["product"].crop is True
