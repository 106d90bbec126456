"""Application layer: use-case handlers and the mediator that routes to them."""

from .mediator import Mediator

__all__ = ["Mediator"]
