"""Testing helpers for torchpoly."""
