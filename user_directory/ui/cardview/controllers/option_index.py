"""
FilterIndexBuilder - Derives dropdown option sets from a user collection.
"""
from typing import Iterable, Sequence, TYPE_CHECKING
from loguru import logger

from user_directory.ui.cardview.models.criteria import FilterOptionSet

if TYPE_CHECKING:
    from user_directory.core.models import UserRecord


class FilterIndexBuilder:
    """
    Builds the distinct, sorted city and company names.

    Always fed the full collection, never a filtered view, so one filter
    never narrows the options of another. The "All ..." sentinel is added
    by the view, not here.
    """

    def build_options(self, collection: Sequence['UserRecord']) -> FilterOptionSet:
        """
        Derive option sets.

        Args:
            collection: Full user collection

        Returns:
            FilterOptionSet (two empty tuples for an empty collection)
        """
        options = FilterOptionSet(
            cities=self._distinct_sorted(user.address.city for user in collection),
            companies=self._distinct_sorted(user.company.name for user in collection),
        )
        logger.debug(
            f"Options built: {len(options.cities)} cities, "
            f"{len(options.companies)} companies"
        )
        return options

    @staticmethod
    def _distinct_sorted(values: Iterable[str]) -> tuple[str, ...]:
        # Code-point order, same as a default JavaScript Array.sort() on strings
        return tuple(sorted(set(values)))
