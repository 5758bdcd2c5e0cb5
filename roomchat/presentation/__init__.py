"""
PRESENTATION LAYER - HTTP surface

FastAPI routers translate requests into commands/queries and results into
DTOs. Domain exceptions are mapped to status codes by the handlers
registered in fastapi_app.
"""
