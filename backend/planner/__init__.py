# backend/planner/__init__.py
# Room explication service for the house configurator
