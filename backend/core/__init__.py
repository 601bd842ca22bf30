"""Projection engine and result presentation."""
