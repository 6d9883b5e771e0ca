"""
Service layer for business logic.

This package contains service classes that orchestrate the
transaction processing pipeline: file parsing, validation,
cash back breakdown, reporting and export.
"""
