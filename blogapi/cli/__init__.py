"""
CLI Client Module.

Interactive command-line client for the blog API.

Architecture:
- CLI is a thin presentation layer
- All business logic lives in the backend
- CLI calls backend via HTTP (httpx)
- Sends X-Frontend-ID: cli header for log routing

Usage:
    python cli.py                   # server and shell in one process
    python cli.py --service shell   # shell against a running server
"""
