"""
ERDKIT Object Filters

Name filters applied to container children. Masks use SQL LIKE syntax:
'%' matches any run of characters and '_' matches a single character.
Matching is case-insensitive.
"""

import re
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field


@lru_cache(maxsize=256)
def mask_to_pattern(mask: str) -> "re.Pattern":
    """Compile a LIKE mask into an anchored regular expression."""
    parts = []
    for char in mask:
        if char == '%':
            parts.append('.*')
        elif char == '_':
            parts.append('.')
        else:
            parts.append(re.escape(char))
    return re.compile('^' + ''.join(parts) + '$', re.IGNORECASE | re.DOTALL)


class ObjectFilter(BaseModel):
    """Include/exclude name filter."""
    name: Optional[str] = Field(None, description="Filter name")
    include: List[str] = Field(default_factory=list, description="Masks a name must match")
    exclude: List[str] = Field(default_factory=list, description="Masks rejecting a name")
    enabled: bool = Field(True, description="Disabled filters accept every name")

    def is_not_applicable(self) -> bool:
        """True when the filter accepts everything."""
        return not self.enabled or (not self.include and not self.exclude)

    def matches(self, name: str) -> bool:
        """
        Check whether a name passes the filter.

        Args:
            name (str): Object name

        Returns:
            bool: True if the object should be shown
        """
        if self.is_not_applicable():
            return True
        if self.include and not any(mask_to_pattern(mask).match(name) for mask in self.include):
            return False
        if any(mask_to_pattern(mask).match(name) for mask in self.exclude):
            return False
        return True
