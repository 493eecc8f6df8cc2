# config.py

# Server listening host
# "127.0.0.1" means only accessible from the local machine
# "0.0.0.0" means accessible from other machines on the network
HOST = "localhost"

# Server listening port
PORT = 8000

# Prefix for the skin rendering API
# Example: "/api/skins" or "/skins"
API_PREFIX = "/skins"

# Logging level for Uvicorn and the application
# Options: "debug", "info", "warning", "error", "critical"
LOG_LEVEL = "info"

# Upload limits
# Skins are at most 64x64, so 1MB is far more than any real skin needs
MAX_UPLOAD_SIZE = 1024 * 1024
# Largest scale factor accepted by the render endpoints (64x64 * 32 = 2048px)
MAX_SCALE = 32

# Edge length in pixels of generated face avatars
AVATAR_SIZE = 128

# CORS configuration
# Allowed origins for CORS (use ["*"] for all in development, specify domains in production)
CORS_ALLOWED_ORIGINS = ["*"]

# Allow credentials in CORS
CORS_ALLOW_CREDENTIALS = False
# Allowed methods for CORS
CORS_ALLOWED_METHODS = ["GET", "POST"]
# Allowed headers for CORS
CORS_ALLOWED_HEADERS = ["*"]
