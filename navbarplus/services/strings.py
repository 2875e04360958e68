from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from navbarplus.models.settings import PACKAGE_DIR
from navbarplus.utilities import LOGGER
from navbarplus.utilities.settings_loader import load_yaml

LANG_DIR = PACKAGE_DIR / "lang"
FALLBACK_LANGUAGE = "en"


@lru_cache(maxsize=32)
def load_language_pack(language: str, lang_dir: Optional[Path] = None) -> Dict[str, Dict[str, str]]:
    """Strings of one language, keyed by component then string identifier."""
    pack = load_yaml(Path(lang_dir or LANG_DIR) / f"{language}.yaml")
    return {
        component: {str(key): str(value) for key, value in (strings or {}).items()}
        for component, strings in pack.items()
    }


def get_string(key: str, component: str, language: str = FALLBACK_LANGUAGE, lang_dir: Optional[Path] = None) -> str:
    """
    Look up a localized string, falling back to English and then to ``[[key]]``.
    """
    for lang in dict.fromkeys((language, FALLBACK_LANGUAGE)):
        value = load_language_pack(lang, lang_dir).get(component, {}).get(key)
        if value is not None:
            return value
    LOGGER.warning("navbarplus.string_missing", key=key, component=component, language=language)
    return f"[[{key}]]"
