"""
Core processing modules for bank transaction handling.

This package contains:
- config: Application configuration and settings
- denominations: Cash back breakdown into bills
- exceptions: Custom exception classes
- exporters: Excel export functionality
- logger: Logging configuration
- parsing: Transaction file parsing
- reporting: Console report formatting
- schema: Pydantic models for records and outcomes
- validation: Business rule checks
"""
