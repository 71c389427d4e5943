"""
tt Test Suite
File: tests/__init__.py

Test modules for timestamp interval pattern compilation.
"""

__all__ = [
    'test_digit_ranges',
    'test_field_compiler',
    'test_interval_patterns',
    'test_timestamp_parsing',
    'test_cli_integration',
    'test_runner_resilience',
    'run_tests'
]
