import os
import sys
import uvicorn

if __name__ == "__main__":
    try:
        sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
        from history_chat.core.config import PORT
        from history_chat.main import app

        print(f"🚀 [RUN] Starting Uvicorn on 0.0.0.0:{PORT}...", flush=True)
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=PORT,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )

    except Exception as e:
        print(f"❌ [FATAL] Failed to start server: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
