"""A side-scrolling platformer about rescuing baby turtles."""

__version__ = "0.1.0"