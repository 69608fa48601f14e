"""Domain layer: value types, the product record and the lookup port."""
