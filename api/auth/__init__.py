"""Basic-auth guard for mutating routes."""
