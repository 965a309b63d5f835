"""Request middleware and authentication/authorization dependencies."""
