"""Keyword rules used to classify activities and spot destination mismatches.

Checkers never match text themselves: they ask this module whether an
activity carries a tag, so a rule can be added or tested without touching
checker control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from itinerary_analyzer.domain.enums import ActivityTag, ActivityType, FindingKind, Priority
from itinerary_analyzer.domain.models import Activity


def _normalize(text: Optional[str]) -> str:
    return str(text or "").strip().lower()


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


@dataclass(frozen=True)
class TextRule:
    tag: ActivityTag
    activity_type: ActivityType
    title_keywords: tuple[str, ...]
    description_keywords: tuple[str, ...] = ()

    def matches(self, activity: Activity) -> bool:
        if activity.activity_type != self.activity_type:
            return False
        if _contains_any(_normalize(activity.title), self.title_keywords):
            return True
        return _contains_any(_normalize(activity.description), self.description_keywords)


# "departure" satisfies both the outbound and the return rule. Kept as-is
# until product decides which direction a "departure" flight is.
ACTIVITY_RULES: tuple[TextRule, ...] = (
    TextRule(
        ActivityTag.OUTBOUND_FLIGHT,
        ActivityType.FLIGHT,
        title_keywords=("depart", "arrive at"),
        description_keywords=("departure",),
    ),
    TextRule(
        ActivityTag.RETURN_FLIGHT,
        ActivityType.FLIGHT,
        title_keywords=("return", "departure"),
        description_keywords=("return",),
    ),
    TextRule(
        ActivityTag.ARRIVAL_FLIGHT,
        ActivityType.FLIGHT,
        title_keywords=("arrive",),
        description_keywords=("arrival",),
    ),
    TextRule(ActivityTag.CHECK_IN, ActivityType.HOTEL, title_keywords=("check-in", "check in")),
    TextRule(ActivityTag.CHECK_OUT, ActivityType.HOTEL, title_keywords=("check-out", "check out")),
    TextRule(ActivityTag.BREAKFAST, ActivityType.MEAL, title_keywords=("breakfast",)),
    TextRule(ActivityTag.DINNER, ActivityType.MEAL, title_keywords=("dinner",)),
)


def has_tag(activity: Activity, tag: ActivityTag, rules: Iterable[TextRule] = ACTIVITY_RULES) -> bool:
    return any(rule.tag == tag and rule.matches(activity) for rule in rules)


@dataclass(frozen=True)
class MismatchRule:
    """Destination keywords paired with activity-title keywords that contradict them."""

    id_prefix: str
    destination_keywords: tuple[str, ...]
    activity_keywords: tuple[str, ...]
    kind: FindingKind
    priority: Priority
    title: str
    description: str
    suggested_fix: str

    def matches(self, destination: str, activity: Activity) -> bool:
        return _contains_any(_normalize(destination), self.destination_keywords) and _contains_any(
            _normalize(activity.title), self.activity_keywords
        )

    def describe(self, destination: str, activity: Activity) -> str:
        return self.description.format(title=activity.title, destination=destination)


MISMATCH_RULES: tuple[MismatchRule, ...] = (
    MismatchRule(
        id_prefix="location-mismatch",
        destination_keywords=("paris",),
        activity_keywords=("tokyo", "japan"),
        kind=FindingKind.ERROR,
        priority=Priority.HIGH,
        title="Location Mismatch",
        description='Activity "{title}" seems to be for a different destination than {destination}.',
        suggested_fix="Double-check this activity is for the correct destination.",
    ),
    MismatchRule(
        id_prefix="season-mismatch",
        destination_keywords=("bali", "thailand"),
        activity_keywords=("skiing", "winter"),
        kind=FindingKind.WARNING,
        priority=Priority.MEDIUM,
        title="Seasonal Activity Mismatch",
        description='"{title}" might not be available in {destination} due to climate.',
        suggested_fix="Verify this activity is available in your destination.",
    ),
)


__all__ = [
    "ACTIVITY_RULES",
    "MISMATCH_RULES",
    "MismatchRule",
    "TextRule",
    "has_tag",
]
