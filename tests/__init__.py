"""Tests for random-bytes."""
