"""
Reconciler - Merges per-source partial profiles into one profile.

Source reliability is a total order: structured data > meta tags > text.
The merge is a fold over partials ordered LEAST reliable first, so the most
reliable source is applied last:

- Scalar fields: a non-empty value replaces whatever is there, so the most
  reliable source that has a value wins.
- List fields: incoming items go in front of what is already there, then
  duplicates are dropped keeping the first occurrence. The result is the
  union in first-seen order across structured -> meta -> text.
- Record fields (contact info): key-wise; a set value replaces, an absent
  value never erases. Social platforms merge the same way per platform.

Conflicts (two sources with different non-empty values for a scalar) are
detected separately for audit; they never change the merge outcome.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..models.business_profile import BusinessProfile, ConflictRecord, ContactInfo, ExtractionSource

logger = logging.getLogger(__name__)


class Reconciler:
    """
    Merges partial profiles using source precedence.

    Field groups:
    1. Scalar fields: most reliable non-empty value wins
    2. List fields: stable union, first occurrence wins position
    3. Record fields: key-wise merge, absent values filled from any source
    """

    SCALAR_FIELDS = ["company_name", "tagline", "description", "mission", "api_docs", "schema_data"]
    LIST_FIELDS = ["services", "products", "team_info"]
    CONTACT_FIELDS = ["email", "phone", "address"]

    # Fields reported by detect_conflicts
    AUDITED_FIELDS = ["company_name", "tagline", "description", "mission"]

    def reconcile(self, partials: Mapping[ExtractionSource, BusinessProfile]) -> BusinessProfile:
        """
        Merge partial profiles keyed by their source.

        Args:
            partials: Source -> partial profile (any subset of sources)

        Returns:
            Merged BusinessProfile
        """
        ordered = sorted(partials.items(), key=lambda item: item[0].reliability)
        return self.merge(profile for _, profile in ordered)

    def merge(self, partials_least_reliable_first: Iterable[BusinessProfile]) -> BusinessProfile:
        """
        Fold partial profiles into one; later (more reliable) partials win.

        Args:
            partials_least_reliable_first: Partials ordered text -> meta -> structured

        Returns:
            New BusinessProfile; inputs are not modified
        """
        merged = BusinessProfile()
        for partial in partials_least_reliable_first:
            self._apply(merged, partial)
        return merged

    def _apply(self, merged: BusinessProfile, incoming: BusinessProfile) -> None:
        for field_name in self.SCALAR_FIELDS:
            value = getattr(incoming, field_name)
            if not _is_empty(value):
                setattr(merged, field_name, list(value) if isinstance(value, list) else value)

        for field_name in self.LIST_FIELDS:
            combined = list(getattr(incoming, field_name)) + list(getattr(merged, field_name))
            setattr(merged, field_name, _dedupe(combined))

        merged.contact_info = self._merge_contact(merged.contact_info, incoming.contact_info)

    def _merge_contact(self, current: ContactInfo, incoming: ContactInfo) -> ContactInfo:
        result = current.model_copy(deep=True)
        for key in self.CONTACT_FIELDS:
            value = getattr(incoming, key)
            if not _is_empty(value):
                setattr(result, key, value)
        for platform, url in incoming.social_media.items():
            if url:
                result.social_media[platform] = url
        return result

    def detect_conflicts(self, partials: Mapping[ExtractionSource, BusinessProfile]) -> list[ConflictRecord]:
        """
        Report scalar and contact fields where sources supplied different values.

        Args:
            partials: Source -> partial profile

        Returns:
            One ConflictRecord per conflicting field, naming the winning source
        """
        conflicts = []

        def values_for(getter) -> dict[ExtractionSource, Any]:
            return {
                source: getter(profile)
                for source, profile in partials.items()
                if not _is_empty(getter(profile))
            }

        checks = [(name, lambda p, n=name: getattr(p, n)) for name in self.AUDITED_FIELDS]
        checks += [
            (f"contact_info.{name}", lambda p, n=name: getattr(p.contact_info, n)) for name in self.CONTACT_FIELDS
        ]

        for field_name, getter in checks:
            source_values = values_for(getter)
            if not has_conflict(source_values.values()):
                continue
            winner = max(source_values, key=lambda s: s.reliability)
            losers = [s.value for s in source_values if s != winner]
            conflict = ConflictRecord(
                field_name=field_name,
                source_values={s.value: v for s, v in source_values.items()},
                selected_source=winner.value,
                selected_value=source_values[winner],
                selection_reason=f"{winner.value} outranks {', '.join(losers)}",
            )
            logger.debug(
                f"Conflict for field '{field_name}': selected {winner.value} over {', '.join(losers)}"
            )
            conflicts.append(conflict)

        return conflicts


def merge_profiles(partials_least_reliable_first: Sequence[BusinessProfile]) -> BusinessProfile:
    """Functional form of Reconciler.merge."""
    return Reconciler().merge(partials_least_reliable_first)


def has_conflict(values: Iterable[Any]) -> bool:
    """
    Check if values disagree after normalization.

    Strings compare case- and whitespace-insensitively; fewer than two
    values is never a conflict.
    """
    unique = set()
    for value in values:
        if isinstance(value, str):
            unique.add(" ".join(value.split()).lower())
        else:
            unique.add(str(value))
    return len(unique) > 1


def _dedupe(items: Iterable[str]) -> list[str]:
    """Drop empty strings and repeats, keeping first-occurrence order."""
    return list(dict.fromkeys(item for item in items if item))


def _is_empty(value: Optional[Any]) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict)) and not value:
        return True
    return False
