"""
Runtime configuration read from the environment.

Values can be placed in a .env file next to main.py, e.g.:
  PORT=3000
  CORS_ORIGINS=http://localhost:5173,http://localhost:3000
  LOG_LEVEL=DEBUG
"""

import os

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3000"))

# Comma-separated; "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Front-end client, served at "/" when the directory exists
STATIC_DIR = os.environ.get("STATIC_DIR", "public")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
