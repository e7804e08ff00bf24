"""Domain layer of the path feature: components, errors and PathValue."""
