"""
Service layer abstraction.

Each service encapsulates the operations of a domain on top of a
repository passed to its constructor, so API handlers never touch the
database directly and tests can hand in a different repository.
"""
