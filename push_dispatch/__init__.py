"""Push notification dispatch service package.

Ensures the local ``push_dispatch`` package takes precedence over similarly
named modules that might be installed in the environment.
"""
