"""
Filter criteria and option sets.

The ALL choice of a dropdown is represented as None; the "All ..." labels
are UI constants and never part of a derived option set.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


ALL_CITIES_LABEL = "All Cities"
ALL_COMPANIES_LABEL = "All Companies"


class FilterCriteria(BaseModel):
    """
    Combined search/city/company filter.

    Attributes:
        search_term: Case-insensitive substring matched against name or username
        city: Exact city name, or None for all cities
        company: Exact company name, or None for all companies
    """
    model_config = ConfigDict(frozen=True)

    search_term: str = Field("", description="Free-text search")
    city: Optional[str] = Field(None, description="Selected city (None = ALL)")
    company: Optional[str] = Field(None, description="Selected company (None = ALL)")

    @property
    def is_active(self) -> bool:
        """Check if any part of the filter narrows the collection."""
        return bool(self.search_term) or self.city is not None or self.company is not None


class FilterOptionSet(BaseModel):
    """Distinct, sorted dropdown values derived from the full collection."""
    model_config = ConfigDict(frozen=True)

    cities: tuple[str, ...] = ()
    companies: tuple[str, ...] = ()
