"""
Entrypoint: python -m app

Connects to MongoDB (exit 1 on failure), then serves on PORT.
"""

from app.main import run


if __name__ == "__main__":
    run()
