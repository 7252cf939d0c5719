"""Domain layer: catalog records, filter state and the catalog registry."""
