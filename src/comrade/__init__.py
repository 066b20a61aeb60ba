"""Comrade: local data layer and CRUD backend for city community posts."""
