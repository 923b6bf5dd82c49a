"""Helper utilities for dklb."""
