"""
Test suite for the dashboard data layer.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_dashboard_store.py -v
"""
