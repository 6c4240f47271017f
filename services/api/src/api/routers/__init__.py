"""
API router package for CallWatch.

Contains the FastAPI router modules for calls, rules, alerts, and
health endpoints.
"""
