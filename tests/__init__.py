"""Test suite for the StatusQuill package."""
