"""PDF compiler tests."""
