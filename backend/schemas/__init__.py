"""Pydantic request/response contracts."""
