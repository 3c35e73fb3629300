"""Storage backends and factories for Files Manager."""
