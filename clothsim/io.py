"""
Scene configuration loading for the cloth simulator.
"""

from typing import Any, Dict
import json
import logging
import os
import yaml
from .cloth import Cloth
from .engine import ClothEngine

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

CLOTH_DEFAULTS = {
    'width': 20,
    'height': 20,
    'spacing': 10,
    'start_x': CANVAS_WIDTH // 2 - 20 * 10,
    'start_y': CANVAS_HEIGHT // 10,
    'elasticity': 10.0
}


class ConfigLoader:
    """Load scene configuration from JSON/YAML files."""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        Load configuration from file.

        Args:
            config_path: Path to configuration file (.json or .yaml)

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If file format is unsupported
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        ext = os.path.splitext(config_path)[1].lower()

        with open(config_path, 'r') as f:
            if ext == '.json':
                config = json.load(f)
            elif ext in ['.yaml', '.yml']:
                config = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported config format: {ext}")

        logger.info(f"Loaded configuration from {config_path}")
        return config or {}

    @staticmethod
    def default_config() -> Dict[str, Any]:
        """Two side-by-side 20x20 cloths hanging from the top of an 800x600 canvas."""
        second = dict(CLOTH_DEFAULTS, start_x=CLOTH_DEFAULTS['start_x'] + 200)
        return {
            'engine': {'dt': 1.0 / 60.0},
            'canvas': {'width': CANVAS_WIDTH, 'height': CANVAS_HEIGHT},
            'cloths': [dict(CLOTH_DEFAULTS), second]
        }

    @staticmethod
    def create_engine_from_config(config: Dict[str, Any]) -> ClothEngine:
        """
        Create a cloth engine from configuration.

        Args:
            config: Configuration dictionary

        Returns:
            Configured ClothEngine instance
        """
        engine_config = config.get('engine', {})
        engine = ClothEngine(dt=engine_config.get('dt', 1.0 / 60.0))

        for cloth_config in config.get('cloths', []):
            engine.add_cloth(ConfigLoader._create_cloth_from_config(cloth_config))

        logger.info(f"Created cloth engine with {len(engine.cloths)} cloths")
        return engine

    @staticmethod
    def _create_cloth_from_config(cloth_config: Dict[str, Any]) -> Cloth:
        """Create a cloth, filling missing keys from CLOTH_DEFAULTS."""
        unknown = set(cloth_config) - set(CLOTH_DEFAULTS)
        if unknown:
            raise ValueError(f"Unknown cloth options: {sorted(unknown)}")

        params = dict(CLOTH_DEFAULTS, **cloth_config)
        return Cloth(**params)
