"""Users: admin-managed accounts."""
