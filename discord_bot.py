import asyncio
import logging
import os

import discord
from dotenv import load_dotenv

from macro_news import NewsSummary, fetch_news_sentiment

MAX_MESSAGE_CHARS = 2000

logger = logging.getLogger("discord_bot")

intents = discord.Intents.default()
intents.message_content = True  # needed to read "!macro"

client = discord.Client(intents=intents)


def format_digest(summary: NewsSummary) -> str:
    """Render a NewsSummary as a Discord message (at most 2000 chars)."""
    themes = ", ".join(summary.themes) if summary.themes else "none detected"
    response = f"📰 Macro news digest ({summary.article_count} articles)\n"
    response += f"Themes: {themes}\n\n"
    for h in summary.headlines:
        response += f"**{h.title}**\n"
        response += f"*{h.source} - {h.published_at}*\n"
        response += f"<{h.url}>\n\n"

    if len(response) > MAX_MESSAGE_CHARS:
        response = response[: MAX_MESSAGE_CHARS - 3] + "..."
    return response


@client.event
async def on_ready():
    logger.info("Logged in as %s", client.user)


@client.event
async def on_message(message):
    # ignore our own messages
    if message.author == client.user:
        return

    if message.content.startswith("!macro"):
        await message.channel.send("Fetching the latest macro news...")

        # never raises; None means no news context this time
        summary = await asyncio.to_thread(fetch_news_sentiment, os.environ)
        if summary is None:
            await message.channel.send("No macro news available right now.")
            return

        await message.channel.send(format_digest(summary))


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    token = os.getenv("DISCORD_BOT_TOKEN")
    if not token:
        raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")
    client.run(token)


if __name__ == "__main__":
    main()
