from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List

from ..locales.locale import Locale
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class LocaleRegistry:
    """Locale lookup table. Entries are read-only once registered."""
    _locales: Dict[str, Locale]

    def get(self, key: str) -> Locale:
        if key not in self._locales:
            raise ConfigurationError(f"Unknown locale '{key}'. Available: {sorted(self._locales)}")
        return self._locales[key]

    def list(self) -> List[str]:
        return sorted(self._locales.keys())

    def register(self, locale: Locale) -> None:
        if locale.key in self._locales:
            raise ConfigurationError(f"Locale '{locale.key}' is already registered.")
        self._locales[locale.key] = locale
        logger.debug("Registered locale %s", locale.key)
