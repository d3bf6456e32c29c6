"""Greeting resource layer package."""

from .interfaces import GreetingResponderPort
from .service import GreetingResponder

__all__ = ["GreetingResponder", "GreetingResponderPort"]
