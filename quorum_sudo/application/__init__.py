"""Application layer - ports and orchestration services for Quorum Sudo."""
