"""FastAPI routes and endpoints.

Endpoints:
- GET /health: Service health status
- GET /ready: Readiness probe (default extractor built)
- POST /api/v1/yake: Keyword extraction for one document
- POST /api/v1/yake/batch: Keyword extraction for several documents
"""
