"""Layout engine tests."""
