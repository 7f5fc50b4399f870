"""Duplicate check options and results."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class MatchType(str, Enum):
    EXACT_NAME = "exact_name"
    SIMILAR_NAME = "similar_name"
    CONTENT = "content"


@dataclass(frozen=True)
class DuplicateCheckOptions:
    check_name: bool = True
    check_content: bool = True
    content_threshold: float = 0.8
    case_sensitive: bool = False
    name_threshold: float = 0.85
    min_content_length: int = 100

    def __post_init__(self):
        for key in ("content_threshold", "name_threshold"):
            v = getattr(self, key)
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"{key} must be in [0, 1], got {v}")
        if self.min_content_length < 0:
            raise ValueError(f"min_content_length must be >= 0, got {self.min_content_length}")

    @classmethod
    def from_policy(cls, policy: Optional[Dict[str, Any]]) -> DuplicateCheckOptions:
        """Build options from the `duplicates` section of review.yaml."""
        policy = policy or {}
        return cls(
            check_name=bool(policy.get("check_name", True)),
            check_content=bool(policy.get("check_content", True)),
            content_threshold=float(policy.get("content_threshold", 0.8)),
            case_sensitive=bool(policy.get("case_sensitive", False)),
            name_threshold=float(policy.get("name_threshold", 0.85)),
            min_content_length=int(policy.get("min_content_length", 100)),
        )


@dataclass
class DuplicateResult:
    is_duplicate: bool
    existing_file: Optional[str] = None
    reason: Optional[str] = None
    similarity: Optional[float] = None
    match_type: Optional[MatchType] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"isDuplicate": self.is_duplicate}
        if self.existing_file is not None:
            out["existingFile"] = self.existing_file
        if self.reason is not None:
            out["reason"] = self.reason
        if self.similarity is not None:
            out["similarity"] = self.similarity
        if self.match_type is not None:
            out["matchType"] = self.match_type.value
        return out
