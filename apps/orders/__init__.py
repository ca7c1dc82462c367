"""Orders app: product orders, hotel booking orders and checkout."""
