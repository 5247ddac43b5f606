"""Comments: read, update and delete by id."""
