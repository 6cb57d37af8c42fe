"""Schemas: pydantic input models for the dispatch service."""
