"""Infrastructure layer - adapters, stubs and observability for Quorum Sudo."""
