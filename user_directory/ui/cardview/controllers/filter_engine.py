"""
FilterEngine - Combined search/city/company filtering for the card grid.

Evaluates one predicate per record and keeps the collection order.
"""
from typing import Sequence, TYPE_CHECKING
from loguru import logger

from user_directory.ui.cardview.models.criteria import FilterCriteria

if TYPE_CHECKING:
    from user_directory.core.models import UserRecord


class FilterEngine:
    """
    Filters a user collection by FilterCriteria.

    A record passes when the lowercased search term is a substring of the
    lowercased name OR of the lowercased username, and the city/company
    match exactly unless they are None (ALL). Name and username are checked
    independently, never concatenated, so a term cannot match across the
    boundary between them.

    Example:
        engine = FilterEngine()
        visible = engine.apply(users, FilterCriteria(search_term="ant"))
    """

    def apply(
        self,
        collection: Sequence['UserRecord'],
        criteria: FilterCriteria,
    ) -> list['UserRecord']:
        """
        Apply criteria to collection.

        Args:
            collection: Users in server order
            criteria: Active criteria

        Returns:
            Order-preserving subsequence; empty when nothing matches
        """
        result = [user for user in collection if self.matches(user, criteria)]
        logger.debug(f"Filter applied: {len(collection)} → {len(result)} users")
        return result

    def matches(self, user: 'UserRecord', criteria: FilterCriteria) -> bool:
        """Check a single record against criteria."""
        return (
            self._matches_term(user, criteria.search_term)
            and (criteria.city is None or user.address.city == criteria.city)
            and (criteria.company is None or user.company.name == criteria.company)
        )

    @staticmethod
    def _matches_term(user: 'UserRecord', term: str) -> bool:
        term_lower = term.lower()
        return term_lower in user.name.lower() or term_lower in user.username.lower()
