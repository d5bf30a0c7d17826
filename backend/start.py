#!/usr/bin/env python3
"""
Startup script for the Video Call API.
This script can start the API server or check the environment.
"""

import os
import sys
import argparse
import subprocess
from pathlib import Path

def run_api(host, port, reload=False):
    """Run the FastAPI server"""
    print(f"🚀 Starting FastAPI server on {host}:{port}...")
    cmd = [sys.executable, "-u", "-m", "uvicorn", "api.main:app", "--host", host, "--port", str(port)]
    if reload:
        cmd.append("--reload")
    env = os.environ.copy()
    env["PYTHONUNBUFFERED"] = "1"
    return subprocess.Popen(
        cmd,
        cwd=Path(__file__).parent,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        bufsize=1,
        env=env
    )

def check_environment():
    """Check that the configuration loads and report what will be served"""
    from core.config import Settings

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return None

    if not os.getenv("SIGNALING_SERVER_URL"):
        print("⚠️  SIGNALING_SERVER_URL not set, using default")
    print(f"📡 Signaling server: {settings.SIGNALING_SERVER_URL}")
    print(f"🌐 Allowed origins: {', '.join(settings.CORS_ORIGINS)}")
    print("✅ Environment variables configured")
    return settings

def check_dependencies():
    """Check if required dependencies are installed"""
    try:
        import fastapi
        import uvicorn
        import pydantic
        print("✅ Dependencies installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("💡 Run: pip install -e .")
        return False

def main():
    parser = argparse.ArgumentParser(description="Video Call API Startup Script")
    parser.add_argument(
        "command",
        choices=["api", "check"],
        help="What to run: api, or check environment"
    )
    parser.add_argument("--host", help="Bind address (defaults to HOST)")
    parser.add_argument("--port", type=int, help="Bind port (defaults to PORT)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args()

    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv(".env.local")

    print("🔍 Checking system requirements...")
    settings = check_environment()
    deps_ok = check_dependencies()
    if settings is None or not deps_ok:
        print("❌ System not ready")
        return 1

    if args.command == "check":
        print("✅ System ready!")
        return 0

    process = run_api(args.host or settings.HOST, args.port or settings.PORT, args.reload)
    try:
        print("✅ API server starting... (logs below)\n")
        # Stream output in real-time
        for line in iter(process.stdout.readline, ''):
            if not line:
                break
            print(line.rstrip())

        return_code = process.wait()
        if return_code != 0:
            print(f"\n❌ API server exited with code {return_code}")
            return 1
    except KeyboardInterrupt:
        print("\n🛑 Stopping API server...")
        process.terminate()
        try:
            process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            process.kill()
            process.wait()

    return 0

if __name__ == "__main__":
    sys.exit(main())
