"""
Script to run the FastAPI server.
"""
import sys
import uvicorn

from productinfo.utils.config import get_settings


if __name__ == "__main__":
    settings = get_settings()
    try:
        print("Starting EC2 Product Info API...")
        print(f"API documentation will be available at: http://{settings.host}:{settings.port}/docs")
        uvicorn.run("productinfo.main:app", host=settings.host, port=settings.port)
    except KeyboardInterrupt:
        print("\nShutting down gracefully...")
    except Exception as e:
        print(f"Error starting the server: {str(e)}")
        sys.exit(1)
