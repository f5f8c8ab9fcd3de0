"""
Services module - Application business logic layer.

Modules:
- workouts: records, sorting, aggregation and the workout store
- storage: key-value blob stores
"""
