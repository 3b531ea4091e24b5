"""
Feature modules for Pace Planner.

Each feature is a self-contained module with:
- calculator.py - Pure calculation logic
- schemas.py - Pydantic schemas
- service.py - Input normalization and orchestration
"""
