"""Bootstrap wiring for Quorum Sudo dependencies."""
