"""
Vercel serverless function entry point.

Export only `app` (ASGI); Vercel serves it for every path routed to this file.
"""
from src.main import app
