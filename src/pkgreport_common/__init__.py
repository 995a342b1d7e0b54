"""Shared utilities for pkgreport: configuration loading and file IO."""
