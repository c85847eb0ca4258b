"""Infrastructure - clients for services outside the list."""
