"""
CallWatch REST API Gateway.

FastAPI-based HTTP server providing endpoints for call submission,
keyword rule management, and alert listing.
"""
