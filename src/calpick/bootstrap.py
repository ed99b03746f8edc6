from __future__ import annotations
from calpick.core.registry import LocaleRegistry
from calpick.locales.standard import STANDARD_LOCALES

def build_registry() -> LocaleRegistry:
    return LocaleRegistry(dict(STANDARD_LOCALES))
