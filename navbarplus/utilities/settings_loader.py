"""
Utility to load the Navbar Plus settings and the tour registry from YAML
"""
import yaml
from pathlib import Path
from typing import Any, Dict, List, Union

from navbarplus.models.settings import NavbarPlusSettings, TourDefinition, PACKAGE_DIR

DEFAULT_SETTINGS_PATH = PACKAGE_DIR / "config" / "navbarplus.yaml"
DEFAULT_TOURS_PATH = PACKAGE_DIR / "config" / "tours.yaml"


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML mapping from ``path``.

    Args:
        path: YAML file to read.

    Returns:
        The parsed mapping, an empty dict if the file does not exist or is empty.

    Raises:
        yaml.YAMLError: the file is not valid YAML.
        ValueError: the document is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        return {}

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def load_navbarplus_settings(config_path: Union[str, Path] = None) -> NavbarPlusSettings:
    """
    Load the plugin settings (``inserticonswithlinks``, ``resetusertours``).
    A missing file gives the default settings, nothing is rendered then.
    """
    config = load_yaml(config_path or DEFAULT_SETTINGS_PATH)
    return NavbarPlusSettings.model_validate(config.get('local_navbarplus', config))


def load_tour_registry(config_path: Union[str, Path] = None) -> List[TourDefinition]:
    config = load_yaml(config_path or DEFAULT_TOURS_PATH)
    return [TourDefinition.model_validate(tour) for tour in config.get('tours') or []]
