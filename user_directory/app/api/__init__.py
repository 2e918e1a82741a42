"""HTTP layer: routers, endpoint handlers and shared dependencies."""
