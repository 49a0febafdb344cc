"""FastAPI / GraphQL server."""
