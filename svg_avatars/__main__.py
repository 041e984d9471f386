"""Write an example avatar: ``python -m svg_avatars``."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from svg_avatars.builder import SvgAvatarBuilder
from svg_avatars.config import Settings

logger = logging.getLogger("svg_avatars")


def main() -> int:
    load_dotenv()
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    avatar = (
        SvgAvatarBuilder()
        .identifier(settings.identifier)
        .rings(settings.rings)
        .stroke_color(settings.stroke_color)
        .build()
    )

    try:
        avatar.save(settings.output)
    except OSError as e:
        logger.error("Failed to save avatar to %s: %s", settings.output, e)
        return 1

    logger.info("Wrote %s (%s rings)", settings.output, settings.rings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
