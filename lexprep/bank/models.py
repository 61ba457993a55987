"""
Question bank records.

Field aliases keep the bank's JSON names (motsCles, erreursGraves, ...) while
Python code uses snake_case attributes.
"""

from __future__ import annotations

import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from lexprep.scoring.keywords import derive_keywords

# Guards first-time keyword derivation when the same question is scored concurrently
_DERIVATION_LOCK = threading.Lock()


def _clean_keyword_list(value: Any) -> list[str]:
    """Strip entries, drop blanks, collapse duplicates keeping first occurrence."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"expected a list of keywords, got {type(value).__name__}")

    cleaned = (str(item).strip() for item in value if item is not None)
    return list(dict.fromkeys(item for item in cleaned if item))


class GraveErrorRule(BaseModel):
    """A penalty rule: when every detect term appears, the score is multiplied by penalty."""

    model_config = ConfigDict(extra="ignore")

    detect: list[str] = Field(default_factory=list)
    penalty: float = Field(ge=0.0, le=1.0)

    @field_validator("detect", mode="before")
    @classmethod
    def _coerce_detect(cls, value: Any) -> list[str]:
        return _clean_keyword_list(value)


class Question(BaseModel):
    """A single bank question with its official answer and keyword sets."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | str
    question: str = ""
    reponse: str = ""
    mots_cles: list[str] = Field(default_factory=list, alias="motsCles")
    mots_cles_essentiels: list[str] = Field(default_factory=list, alias="motsClesEssentiels")
    mots_cles_secondaires: list[str] = Field(default_factory=list, alias="motsClesSecondaires")
    erreurs_graves: list[GraveErrorRule] = Field(default_factory=list, alias="erreursGraves")

    _derived_keywords: list[str] | None = PrivateAttr(default=None)

    @field_validator("question", "reponse", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("mots_cles", "mots_cles_essentiels", "mots_cles_secondaires", mode="before")
    @classmethod
    def _coerce_keywords(cls, value: Any) -> list[str]:
        return _clean_keyword_list(value)

    @field_validator("erreurs_graves", mode="before")
    @classmethod
    def _none_to_no_rules(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_weighted_keywords(self) -> bool:
        return bool(self.mots_cles_essentiels or self.mots_cles_secondaires)

    def resolved_keywords(self) -> list[str]:
        """
        Flat keyword list used for scoring.

        Explicit motsCles win. Otherwise keywords are derived from the official
        answer on first call and memoized on this instance, so the list stays
        stable for the rest of the session. The stored motsCles field is never
        modified.
        """
        if self.mots_cles:
            return list(self.mots_cles)

        if self._derived_keywords is None:
            with _DERIVATION_LOCK:
                if self._derived_keywords is None:
                    self._derived_keywords = derive_keywords(self.reponse)

        return list(self._derived_keywords)

    def essential_keywords(self) -> list[str]:
        """Essential tier, falling back to the flat keyword list."""
        if self.mots_cles_essentiels:
            return list(self.mots_cles_essentiels)
        return self.resolved_keywords()

    def secondary_keywords(self) -> list[str]:
        return list(self.mots_cles_secondaires)

    def to_record(self) -> dict[str, Any]:
        """Serialize with the bank's JSON field names."""
        return self.model_dump(by_alias=True, mode="json")
