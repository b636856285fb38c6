"""
User Backend Application - root package.

This package contains the FastAPI app entry point (main.py), API routes,
the user domain (model, validation rules, repository contract), the
use cases that implement the resource lifecycle, and the in-memory and
MongoDB stores.
"""
