"""
Feature modules for the PetPal backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Supabase queries for the module's tables
- service.py: Business logic implementation
- exceptions.py: Module-specific exceptions

HTTP routes live in api/routes/. Modules communicate through
interfaces, not concrete implementations.
"""
