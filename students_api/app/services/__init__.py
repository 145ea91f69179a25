"""
Service layer.

Services own the SQL for their table and are handed to the endpoints
through FastAPI dependencies.
"""
