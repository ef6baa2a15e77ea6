"""CLI configuration: constants, models, and the on-disk manager."""
