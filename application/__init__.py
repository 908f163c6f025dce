"""
Application Layer for the Exercise Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Application workflows coordinating the repositories
- exceptions.py: Errors shared with the infrastructure layer
"""
