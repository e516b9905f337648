"""HR notification routing and delivery service."""
