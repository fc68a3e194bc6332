"""
FastAPI application for managing employee records.

The application is layered as endpoints → services → repositories,
with Pydantic schemas describing request and response bodies and a
plain dataclass describing the stored record.
"""
