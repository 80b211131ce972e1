"""User Registry API: CRUD over an in-memory collection of users."""
