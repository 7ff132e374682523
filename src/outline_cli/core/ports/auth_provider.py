"""
Auth Port - Abstract interface for looking up the current user.

Implementations:
- OutlineAdapter: Outline's auth.info endpoint
"""

from abc import ABC, abstractmethod

from outline_cli.core.domain.entities import Identity


class AuthPort(ABC):
    """Something that can tell who the API credentials belong to."""

    @abstractmethod
    def current(self) -> Identity:
        """
        Retrieve the currently authenticated user.

        Returns:
            Identity of the user

        Raises:
            AdapterError: If the lookup failed for any reason
        """
        ...
