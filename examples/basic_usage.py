"""
Basic usage example for the Subtext Python SDK.

Tracks a thread, a user message and an LLM run. Tracking failures are
reported but never stop the surrounding application flow.

Usage:
    SUBTEXT_API_KEY=... python examples/basic_usage.py
"""

import asyncio
import json

from loguru import logger

from subtext import SubtextAPIError, SubtextClient, setup_logging


async def main() -> None:
    setup_logging()

    async with SubtextClient() as client:
        try:
            thread = await client.thread("thread-123", user_id="user-456")
            logger.info(f"Thread created: {thread}")

            message = await client.message(
                thread_id=thread.thread_id,
                message="Hello, world!",
                message_id="msg-456",
            )
            logger.info(f"Message created: {message}")

            run = await client.run(
                thread_id=thread.thread_id,
                run_id="run-789",
                response="Hello! How can I help you today?",
            )
            logger.info(f"Run recorded: {run}")

            for record in (thread, message, run):
                print(json.dumps(record.to_dict(), indent=2))

        except SubtextAPIError as e:
            logger.error(f"Tracking failed ({e.kind}): {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
