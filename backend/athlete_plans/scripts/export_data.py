"""Send the current data file to a Telegram chat as a document backup."""

from __future__ import annotations

import logging
import sys

import requests

from athlete_plans.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org"


def send_data_file(settings: Settings) -> bool:
    if not settings.telegram_bot_token or not settings.telegram_chat_id:
        logger.error("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must both be set")
        return False

    data_file = settings.data_file
    if not data_file.is_file():
        logger.error("Data file not found: %s", data_file)
        return False

    url = f"{TELEGRAM_API_URL}/bot{settings.telegram_bot_token}/sendDocument"
    try:
        with data_file.open("rb") as document:
            response = requests.post(
                url,
                data={"chat_id": settings.telegram_chat_id},
                files={"document": (data_file.name, document, "application/json")},
                timeout=settings.export_timeout,
            )
    except requests.RequestException as exc:
        logger.error("Failed to send %s: %s", data_file, exc)
        return False

    try:
        payload = response.json()
    except ValueError:
        logger.error("Unexpected response from Telegram (%s): %s", response.status_code, response.text)
        return False

    if not payload.get("ok"):
        logger.error("Telegram API error: %s", payload.get("description", "unknown error"))
        return False

    logger.info("Sent %s to chat %s", data_file, settings.telegram_chat_id)
    return True


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(message)s")
    return 0 if send_data_file(settings) else 1


if __name__ == "__main__":
    sys.exit(main())
