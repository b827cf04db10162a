"""
Integration tests for CG Tasks

FrappeTestCase suites that need a site; run them with
bench --site <site> run-tests --app cg_tasks.
"""

__all__ = []
