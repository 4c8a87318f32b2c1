"""Domain layer — the literal value engine and its parsing rules."""
