"""Entry point for serving the mindmap viewer.

Usage:
    python run_server.py --port 8000 --mindmap-dir /path/to/mindmaps
"""

import argparse
import os


def main() -> None:
    parser = argparse.ArgumentParser(description="Mindmap Viewer Backend")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--mindmap-dir", type=str, default=None, help="Directory holding mindmap files")
    args = parser.parse_args()

    if args.mindmap_dir:
        os.environ["MINDMAP_BASE_DIR"] = args.mindmap_dir

    import uvicorn
    from app.main import app

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
