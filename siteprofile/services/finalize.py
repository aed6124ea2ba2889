"""
Final clean-up of a merged, filtered and classified profile.

List fields are de-duplicated once more (filtering and merging can both
leave repeats behind when sources differ only in surrounding whitespace),
empty entries are dropped, and the two fields the generator cannot do
without get placeholders.
"""

from ..constants import PLACEHOLDER_COMPANY_NAME, PLACEHOLDER_DESCRIPTION
from ..models.business_profile import BusinessProfile


def _clean_list(items: list[str]) -> list[str]:
    stripped = (item.strip() for item in items if item)
    return list(dict.fromkeys(item for item in stripped if item))


def finalize_profile(
    profile: BusinessProfile,
    placeholder_company_name: str = PLACEHOLDER_COMPANY_NAME,
    placeholder_description: str = PLACEHOLDER_DESCRIPTION,
) -> BusinessProfile:
    """
    Return a finalized copy of the profile.

    Args:
        profile: Merged profile after policy filtering and classification
        placeholder_company_name: Used when no source resolved a name
        placeholder_description: Used when no source resolved a description

    Returns:
        New BusinessProfile; the input is not modified
    """
    final = profile.model_copy(deep=True)
    final.services = _clean_list(final.services)
    final.products = _clean_list(final.products)
    final.team_info = _clean_list(final.team_info)

    if not final.company_name:
        final.company_name = placeholder_company_name
    if not final.description:
        final.description = placeholder_description
    return final
