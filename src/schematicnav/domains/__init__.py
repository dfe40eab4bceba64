"""Domain-Driven Design bounded contexts for schematic-nav.

This package contains:
- Navigation Context: symbolic configuration, intent validation,
  target resolution and dispatch to the browser driver
"""
