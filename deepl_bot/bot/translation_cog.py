import logging
from types import SimpleNamespace
import discord
from discord import app_commands
from discord.ext import commands
from deepl_bot.translation.batch import translate_all
from deepl_bot.translation.errors import NoTranslatableContent
from deepl_bot.translation.extractor import extract
from deepl_bot.translation.reassembler import Reassembly, reassemble
from deepl_bot.utils.languages import map_locale_to_deepl
from deepl_bot.utils.text_utils import MAX_EMBEDS, MAX_TOTAL_EMBED_CHARS

log = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No text found to translate."
ERROR_MESSAGE = "An error occurred during translation."


class TranslationCog(commands.Cog):
    """Translates messages, including their embeds, with DeepL."""

    def __init__(self, bot, provider):
        self.bot = bot
        self.provider = provider

    async def cog_load(self):
        # Context Menus
        self.ctx_menus = [
            app_commands.ContextMenu(name="Translate with DeepL", callback=self.translate_message_context),
        ]
        for menu in self.ctx_menus:
            self.bot.tree.add_command(menu)

    async def cog_unload(self):
        for menu in getattr(self, "ctx_menus", []):
            try:
                self.bot.tree.remove_command(menu.name, type=menu.type)
            except Exception:
                pass

    # --- Translation Pipeline ---

    async def translate_message(self, message, target_lang: str) -> Reassembly:
        """Extract, translate in one batch, and rebuild a message's text."""
        units = extract(message)
        results = await translate_all(units, target_lang, self.provider)
        return reassemble(message, units, results, target_lang)

    @staticmethod
    def build_reply_embeds(reassembly: Reassembly) -> list[discord.Embed]:
        embeds = list(reassembly.embeds)
        if reassembly.body is not None:
            embeds.insert(0, reassembly.body)
        if len(embeds) > MAX_EMBEDS:
            log.warning(f"Dropping {len(embeds) - MAX_EMBEDS} embeds over the per-message limit")
            embeds = embeds[:MAX_EMBEDS]

        # Discord also caps the combined text of all embeds in a message
        kept, total = [], 0
        for embed in embeds:
            if total + len(embed) > MAX_TOTAL_EMBED_CHARS:
                break
            kept.append(embed)
            total += len(embed)
        if len(kept) < len(embeds):
            log.warning(f"Dropping {len(embeds) - len(kept)} embeds over the per-message character limit")
        return kept

    async def _edit_reply(self, interaction: discord.Interaction, **kwargs) -> bool:
        try:
            await interaction.edit_original_response(**kwargs)
        except discord.HTTPException as e:
            log.exception(f"Failed to edit translation reply: {e}")
            return False
        return True

    async def _reply_with_translation(self, interaction: discord.Interaction, message):
        """Translate ``message`` and edit the deferred response with the outcome."""
        target_lang = map_locale_to_deepl(interaction.locale)
        try:
            reassembly = await self.translate_message(message, target_lang)
        except NoTranslatableContent:
            await self._edit_reply(interaction, content=NO_TEXT_MESSAGE)
            return
        except Exception as e:
            log.exception(f"Translation error: {e}")
            await self._edit_reply(interaction, content=ERROR_MESSAGE)
            return

        if not await self._edit_reply(interaction, embeds=self.build_reply_embeds(reassembly)):
            await self._edit_reply(interaction, content=ERROR_MESSAGE, embeds=[])

    # --- Commands ---

    async def translate_message_context(self, interaction: discord.Interaction, message: discord.Message):
        await interaction.response.defer(ephemeral=True)
        await self._reply_with_translation(interaction, message)

    @app_commands.command(name="translate", description="Translate text into your language with DeepL")
    @app_commands.describe(text="The text to translate")
    async def translate_text(self, interaction: discord.Interaction, text: str):
        """Translate free-form text, attributed to the invoking user."""
        await interaction.response.defer(ephemeral=True)
        message = SimpleNamespace(content=text, embeds=[], author=interaction.user)
        await self._reply_with_translation(interaction, message)
