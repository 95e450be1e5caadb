"""Testing – in-memory doubles for the platform ports."""
