"""Core plusvalía domain: models, rules and calculators."""
