import logging
import sys

from app.sample_post import build_sample_post
from app.serializer import serialize

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        sys.stdout.write(serialize(build_sample_post()) + "\n")
    except Exception as e:
        logger.error(f"Serializing the sample post failed: {e}", exc_info=True)
        sys.exit(1)
