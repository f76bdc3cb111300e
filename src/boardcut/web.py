#!/usr/bin/env python3
"""웹 서버 진입점"""

from .config import WEB_HOST, WEB_PORT


def run_server(host: str = WEB_HOST, port: int = WEB_PORT):
    """웹 서버 시작"""
    import uvicorn
    from .web_app.server import app

    print("Starting Boardcut Web Server...")
    print(f"Open http://localhost:{port} in your browser")
    uvicorn.run(app, host=host, port=port)
