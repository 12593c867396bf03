import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

OUTPUT_FORMAT = os.getenv("RECOLOR_OUTPUT_FORMAT", "PNG")   # Pillow format name
COPY_MARKER   = os.getenv("RECOLOR_COPY_MARKER", "_copy")   # inserted before the extension
LOG_LEVEL     = os.getenv("LOG_LEVEL", "INFO")
