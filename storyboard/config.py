import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    # --- Cell Defaults ---
    FONT_NAME = os.getenv("FONT_NAME", "Helvetica")
    FONT_NAME_BOLD = os.getenv("FONT_NAME_BOLD", "Helvetica-Bold")
    FONT_SIZE = float(os.getenv("FONT_SIZE", "12"))
    LEADING_RATIO = float(os.getenv("LEADING_RATIO", "1.2"))
    CELL_PADDING = float(os.getenv("CELL_PADDING", "5"))
    BORDER_WIDTH = float(os.getenv("BORDER_WIDTH", "1"))
    BORDER_COLOR = os.getenv("BORDER_COLOR", "000000")
    TEXT_COLOR = os.getenv("TEXT_COLOR", "000000")

    # --- Layout ---
    # Floating point slack used when comparing widths and page space
    FP_TOLERANCE = float(os.getenv("FP_TOLERANCE", "1e-6"))
    PAGE_MARGIN_MM = float(os.getenv("PAGE_MARGIN_MM", "12"))

    # --- Storyboard Cards ---
    # 0 means two cards share the page width
    STORY_CARD_WIDTH = float(os.getenv("STORY_CARD_WIDTH", "0"))
    STORY_FOOTER_HEIGHT = float(os.getenv("STORY_FOOTER_HEIGHT", "50"))
    STORY_BORDER_COLOR = os.getenv("STORY_BORDER_COLOR", "cccccc")

    # --- Logging ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


def configure_logging(level=None):
    """Attach a basic handler to the Storyboard logger hierarchy."""
    level = level or Config.LOG_LEVEL
    logger = logging.getLogger("Storyboard")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
