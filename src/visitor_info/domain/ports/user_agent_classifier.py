"""Port for user agent classification."""

from abc import abstractmethod
from typing import Protocol

from visitor_info.domain.models import UserAgentDetails


class UserAgentClassifier(Protocol):
    """Port for deriving browser and OS names from a user agent string."""

    @abstractmethod
    def classify(self, user_agent: str) -> UserAgentDetails:
        """Classify a user agent. Unknown values are returned as None."""
        ...
