"""User agent adapters."""

from visitor_info.adapters.user_agent.user_agents_classifier import UserAgentsClassifier

__all__ = ["UserAgentsClassifier"]
