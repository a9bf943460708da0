"""Users REST API.

A single-table CRUD service: FastAPI routes over a SQLModel ``users`` table,
with configuration, logging and schema bootstrap wired in at startup.
"""

__version__ = "0.1.0"
