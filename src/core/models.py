"""Immutable result model for fact-check responses.

Includes the FactCheckResult dataclass and `parse_results`, which validates a
decoded backend payload and keeps only well-formed items.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Tuple

from core.errors import MalformedResultError


Verdict = Literal["correct", "incorrect", "unverifiable", "debatable", "not-applicable"]

VERDICTS: Tuple[str, ...] = ("correct", "incorrect", "unverifiable", "debatable", "not-applicable")


@dataclass(frozen=True)
class FactCheckResult:
    """One checked clause or statement.

    Fields:
    - text: exact wording from the submitted text
    - result: one of VERDICTS
    - explanation: reasoning behind the verdict
    - sources: URLs backing the verdict (may be empty)
    """

    text: str
    result: Verdict
    explanation: str
    sources: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["sources"] = list(self.sources)
        return d


def _is_valid_item(obj: Any) -> bool:
    if not isinstance(obj, dict):
        return False
    sources = obj.get("sources")
    return (
        isinstance(obj.get("text"), str)
        and obj.get("result") in VERDICTS
        and isinstance(obj.get("explanation"), str)
        and isinstance(sources, list)
        and all(isinstance(s, str) for s in sources)
    )


def parse_results(payload: Any) -> List[FactCheckResult]:
    """Validate a decoded payload into FactCheckResult items.

    Invalid items are dropped. Raises MalformedResultError if the payload is
    not a list, or if it is non-empty but contains no valid item.
    """
    if not isinstance(payload, list):
        raise MalformedResultError("Expected an array of fact-check results")

    valid = [
        FactCheckResult(
            text=item["text"],
            result=item["result"],
            explanation=item["explanation"],
            sources=tuple(item["sources"]),
        )
        for item in payload
        if _is_valid_item(item)
    ]

    if payload and not valid:
        raise MalformedResultError("No valid fact-check results found in the response")

    return valid
