"""
User Management Module

Roster user management with clear separation of concerns:
- auth: Bearer token gate
- domain: Domain models, validation and errors
- services: Business logic
- repositories: In-memory user store
- api: REST API endpoints
"""
