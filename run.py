import logging
import os

import uvicorn

# Determine environment: "prod" or "local"
ENV = os.getenv("ENV", "local").lower()

# Default settings
HOST = "localhost"
PORT = int(os.getenv("PORT", "8000"))
RELOAD = True  # Enable live reload in local development

# Production config
if ENV == "prod":
    HOST = "0.0.0.0"
    RELOAD = False  # Disable reload in production

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Start the FastAPI app
if __name__ == "__main__":
    logging.getLogger(__name__).info("Starting in %s mode on %s:%s", ENV, HOST, PORT)
    uvicorn.run("app.main:app", host=HOST, port=PORT, reload=RELOAD)
