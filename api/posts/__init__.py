"""Posts: CRUD, denormalized blog name and post-scoped comment routes."""
