"""Kernel – error hierarchy and the worker lifecycle state machine."""
