"""FX parity GraphQL API (FastAPI + Strawberry)."""
