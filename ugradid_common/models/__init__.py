"""Marshmallow-backed model layer."""
