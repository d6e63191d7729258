"""Practice problems for lessons 1 to 5."""
