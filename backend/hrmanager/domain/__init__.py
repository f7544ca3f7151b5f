"""Domain entities, repositories and the aggregate model."""
