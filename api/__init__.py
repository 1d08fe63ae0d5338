"""API package - FastAPI routers, middleware and dependencies"""
