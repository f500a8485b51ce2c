import asyncio
import logging
import sys
import discord
from discord.ext import commands
from ..settings import (
    DISCORD_TOKEN,
    DEEPL_API_KEY,
    DEEPL_SERVER_URL,
    GUILD_ID,
    TRANSLATION_PROVIDER,
)
from ..translation.providers import build_provider
from .translation_cog import TranslationCog

log = logging.getLogger(__name__)


class DeepLBot(commands.Bot):
    def __init__(self, provider):
        # Context menu payloads carry the target message, so no privileged intents
        intents = discord.Intents.default()
        super().__init__(command_prefix="/", intents=intents)
        self.provider = provider

    async def setup_hook(self):
        # Load Cogs
        await self.add_cog(TranslationCog(self, self.provider))

        # Sync tree
        if GUILD_ID:
            guild = discord.Object(id=GUILD_ID)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            log.info(f"Synced {len(synced)} commands to guild {GUILD_ID}")
        else:
            synced = await self.tree.sync()
            log.info(f"Synced {len(synced)} global commands")

    async def on_ready(self):
        # pyrefly: ignore [missing-attribute]
        log.info(f"Logged in as {self.user} (ID: {self.user.id})")
        log.info(f"Connected to {len(self.guilds)} guilds")
        for guild in self.guilds:
            log.info(f" - {guild.name} (ID: {guild.id})")
        log.info("------")


async def _async_main(provider):
    bot = DeepLBot(provider)
    async with bot:
        # pyrefly: ignore [bad-argument-type]
        await bot.start(DISCORD_TOKEN)


def main():
    discord.utils.setup_logging()
    if not DISCORD_TOKEN:
        log.error("Missing DISCORD_TOKEN. Please check your environment.")
        sys.exit(1)
    try:
        provider = build_provider(TRANSLATION_PROVIDER, DEEPL_API_KEY, server_url=DEEPL_SERVER_URL)
    except Exception as e:
        log.error(f"Could not configure translation provider: {e}")
        sys.exit(1)

    try:
        asyncio.run(_async_main(provider))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
