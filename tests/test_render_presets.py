import pytest

from thumbor_bridge.scripts.render_presets import main, render


def test_render(service):
    lines = render(service, "https://example.com/hero.jpg", 2000, 1000)
    assert [line.split("\t")[:2] for line in lines] == [
        ["thumbnail", "150x150"],
        ["medium", "300x300"],
        ["large", "1024x1000"],
        ["full", "2000x1000"],
    ]
    assert lines[0].endswith(
        "/crop-150x150/smart/jpg/https://example.com/hero.jpg"
    )


def test_render_without_dimensions(service):
    lines = render(service, "https://example.com/hero.jpg")
    assert lines[-1].split("\t")[:2] == ["full", "0x0"]


def test_main_rejects_invalid_url(capsys):
    with pytest.raises(SystemExit):
        main(["not a url"])
    assert "Invalid source image URL" in capsys.readouterr().err
