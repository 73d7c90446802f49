"""
Holiday Name Translators

Map stable holiday identifiers to display strings. Only formatters use
translators; the calculation core works with identifiers.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Protocol, Union, runtime_checkable

import yaml

from ..models import HolidayName

# Bundled translation files, one per language
TRANSLATIONS_DIR = Path(__file__).parent / "data"


@runtime_checkable
class Translator(Protocol):
    """Protocol for holiday name translators."""

    def translate(self, holiday_name: str) -> str:
        ...


class NullTranslator:
    """Returns identifiers unchanged."""

    def translate(self, holiday_name: str) -> str:
        return holiday_name


class DictTranslator:
    """
    Translator backed by a mapping of identifier -> display name.

    Compensatory names without an entry of their own are rendered as the
    translated base name followed by the translated ``compensatory`` key,
    e.g. "Christmas Day (observed)".
    """

    COMPENSATORY_KEY = "compensatory"

    def __init__(self, mapping: Mapping[str, str], fallback: Optional[Translator] = None):
        self.mapping = dict(mapping)
        self.fallback = fallback

    def translate(self, holiday_name: str) -> str:
        if holiday_name in self.mapping:
            return self.mapping[holiday_name]
        suffix = self.mapping.get(self.COMPENSATORY_KEY)
        if suffix is not None and HolidayName.is_compensatory(holiday_name):
            return f"{self.translate(HolidayName.base_name(holiday_name))} {suffix}"
        if self.fallback is not None:
            return self.fallback.translate(holiday_name)
        return holiday_name

    @classmethod
    def from_yaml(cls, path: Union[str, Path], fallback: Optional[Translator] = None) -> DictTranslator:
        """
        Load a mapping from a YAML file.

        Raises:
            ValueError: If the file does not hold a flat string mapping
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise ValueError(f"Translation file {path} must map names to strings")
        return cls(data, fallback)

    @classmethod
    def for_language(cls, language: str, fallback: Optional[Translator] = None) -> DictTranslator:
        """
        Load a bundled translation.

        Raises:
            ValueError: If no translation is bundled for ``language``
        """
        path = TRANSLATIONS_DIR / f"{language.lower()}.yaml"
        if not path.is_file():
            raise ValueError(
                f"No translation for '{language}'; available: {', '.join(available_languages())}"
            )
        return cls.from_yaml(path, fallback)


def available_languages() -> list[str]:
    return sorted(p.stem for p in TRANSLATIONS_DIR.glob("*.yaml"))
