"""HTTP API for Quorum Sudo."""
