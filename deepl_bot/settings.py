import os

DISCORD_TOKEN = os.environ.get("DISCORD_TOKEN")
DEEPL_API_KEY = os.environ.get("DEEPL_API_KEY")
# Optional override, e.g. a DeepL mock server or the pro endpoint
DEEPL_SERVER_URL = os.environ.get("DEEPL_SERVER_URL") or None

# Commands sync globally unless a guild is given
GUILD_ID = int(os.environ["GUILD_ID"]) if os.environ.get("GUILD_ID") else None

# Translation
TRANSLATION_PROVIDER = os.environ.get("TRANSLATION_PROVIDER", "deepl").lower()
DEFAULT_TARGET_LANG = os.environ.get("DEFAULT_TARGET_LANG", "EN-US")
TRANSLATION_EMBED_COLOR = int(os.environ.get("TRANSLATION_EMBED_COLOR", "0099FF"), 16)
