"""
Boundary layer for external system integrations.

Handles all interactions with external systems (PostgreSQL, Redis, embedding
providers). Provides adapters and clients for infrastructure dependencies.
"""
