import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_url_builder_imports_with_invalid_environment():
    env = dict(os.environ, THUMBOR_SERVER="", PYTHONPATH=str(ROOT))
    result = subprocess.run(
        [
            sys.executable,
            "-c",
            "from thumbor_bridge.services.url_builder import build_url",
        ],
        cwd=ROOT,
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr


def test_create_app_applies_log_level(unsigned_settings, provider):
    import logging

    from thumbor_bridge.main import create_app
    from thumbor_bridge.services.thumbor_service import ThumborService

    settings = unsigned_settings.model_copy(update={"log_level": "debug"})
    create_app(ThumborService(settings, provider=provider))
    assert logging.getLogger("thumbor_bridge").level == logging.DEBUG
