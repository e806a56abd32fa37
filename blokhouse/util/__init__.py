"""
Utility functions and helpers.

Modules:
- files: Reading and writing workspace files
- logging: Logging configuration
- progress: Console status output for long-running exports
"""
