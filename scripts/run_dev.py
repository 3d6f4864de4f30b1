"""
Development server launcher.

Loads the .env file and runs the analytics API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the LiftLog analytics API in reload mode")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    print(f"API:  http://{args.host}:{args.port}")
    print(f"Docs: http://{args.host}:{args.port}/docs")

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level="info")
