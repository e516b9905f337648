"""Use cases for managing notification routing rules."""

from .create_routing_rule import create_routing_rule
from .list_routing_rules import list_routing_rules

__all__ = ["create_routing_rule", "list_routing_rules"]
