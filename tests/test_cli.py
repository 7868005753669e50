import json
import logging

import pytest

from clothsim.__main__ import main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("clothsim")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_headless_default_scene():
    assert main(['--frames', '5', '--log-level', 'WARNING']) == 0


def test_headless_with_config_and_save(tmp_path):
    config = tmp_path / "scene.json"
    config.write_text(json.dumps({'cloths': [{'width': 4, 'height': 4}]}))
    image = tmp_path / "out.png"
    log_file = tmp_path / "run.log"
    assert main(['--config', str(config), '--frames', '2', '--save', str(image),
                 '--log-file', str(log_file)]) == 0
    assert image.exists()
    assert "Finished 2 frames" in log_file.read_text()
