"""
AreaWatch Backend: Application Package Initializer
====================================================

AreaWatch is a small in-memory REST service for geofenced areas and the
users whose locations are checked against them.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Required-field checks, lookups
    ├─────────────────────────────────────┤
    │             Schemas (Data)          │  ← Pydantic request/response models
    ├─────────────────────────────────────┤
    │        RecordStore (In-Memory)      │  ← Lock-guarded lists, id counters
    └─────────────────────────────────────┘

Nothing is persisted; every process starts from the sample data in seed.py.
"""

__version__ = "1.0.0"
