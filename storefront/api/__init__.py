"""HTTP layer: dependencies, middleware and route mounting."""
