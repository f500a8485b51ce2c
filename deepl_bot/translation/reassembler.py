import logging
from datetime import datetime
from typing import NamedTuple, Optional, Sequence
import discord
from deepl_bot.settings import TRANSLATION_EMBED_COLOR
from deepl_bot.translation.errors import ResultCountMismatch
from deepl_bot.translation.models import (
    BodySlot,
    EmbedPart,
    EmbedSlot,
    FieldPart,
    ListFieldRef,
    TranslatableUnit,
    TranslationResult,
)
from deepl_bot.utils.languages import get_language_full_name
from deepl_bot.utils.text_utils import (
    AUTHOR_NAME_LIMIT,
    DESCRIPTION_LIMIT,
    FIELD_NAME_LIMIT,
    FIELD_VALUE_LIMIT,
    FOOTER_TEXT_LIMIT,
    TITLE_LIMIT,
    truncate,
)

log = logging.getLogger(__name__)


class Reassembly(NamedTuple):
    body: Optional[discord.Embed]
    embeds: list[discord.Embed]


def provenance_text(source_lang: str, target_lang: str) -> str:
    return (
        f"Translated from {get_language_full_name(source_lang)} "
        f"to {get_language_full_name(target_lang)}"
    )


def build_body_embed(
    original, result: TranslationResult, target_lang: str, now: Optional[datetime] = None
) -> discord.Embed:
    """Reply embed carrying the translated message content, attributed to its author."""
    embed = discord.Embed(
        color=TRANSLATION_EMBED_COLOR,
        description=truncate(result.text, DESCRIPTION_LIMIT),
        timestamp=now or discord.utils.utcnow(),
    )
    author = original.author
    embed.set_author(name=author.display_name, icon_url=author.display_avatar.with_size(128).url)
    embed.set_footer(text=provenance_text(result.detected_source_lang, target_lang))
    return embed


def _overlay_scalar(embed: discord.Embed, part: EmbedPart, text: str):
    if part is EmbedPart.TITLE:
        embed.title = truncate(text, TITLE_LIMIT)
    elif part is EmbedPart.DESCRIPTION:
        embed.description = truncate(text, DESCRIPTION_LIMIT)
    elif part is EmbedPart.AUTHOR_NAME:
        embed.set_author(
            name=truncate(text, AUTHOR_NAME_LIMIT),
            url=embed.author.url,
            icon_url=embed.author.icon_url,
        )
    elif part is EmbedPart.FOOTER_TEXT:
        embed.set_footer(text=truncate(text, FOOTER_TEXT_LIMIT), icon_url=embed.footer.icon_url)


def _overlay_field(embed: discord.Embed, embed_index: int, ref: ListFieldRef, text: str) -> bool:
    if ref.field_index >= len(embed.fields):
        log.warning(
            f"Embed {embed_index} has no field {ref.field_index}; skipping translated {ref.part.value}"
        )
        return False
    field = embed.fields[ref.field_index]
    name, value = field.name, field.value
    if ref.part is FieldPart.NAME:
        name = truncate(text, FIELD_NAME_LIMIT)
    else:
        value = truncate(text, FIELD_VALUE_LIMIT)
    embed.set_field_at(ref.field_index, name=name, value=value, inline=field.inline)
    return True


def rebuild_embed(
    original: discord.Embed,
    embed_index: int,
    overlays: Sequence[tuple[EmbedSlot, TranslationResult]],
    target_lang: str,
) -> discord.Embed:
    """Copy an embed and replace each translated slot.

    Colour, timestamp, images, URLs and untranslated text pass through
    unchanged. A translated embed without footer text gets a provenance footer.
    """
    embed = original.copy()
    source_lang = None
    for slot, result in overlays:
        if isinstance(slot.field, ListFieldRef):
            applied = _overlay_field(embed, embed_index, slot.field, result.text)
        else:
            _overlay_scalar(embed, slot.field, result.text)
            applied = True
        if applied and source_lang is None:
            source_lang = result.detected_source_lang

    if source_lang is not None and not embed.footer.text:
        embed.set_footer(text=provenance_text(source_lang, target_lang), icon_url=embed.footer.icon_url)
    return embed


def reassemble(
    original,
    units: Sequence[TranslatableUnit],
    results: Sequence[TranslationResult],
    target_lang: str,
    now: Optional[datetime] = None,
) -> Reassembly:
    """Route each translated result back to the slot it was extracted from."""
    if len(units) != len(results):
        raise ResultCountMismatch(len(units), len(results))

    lookup = {unit.origin: result for unit, result in zip(units, results)}

    body = None
    body_result = lookup.get(BodySlot())
    if body_result is not None:
        body = build_body_embed(original, body_result, target_lang, now=now)

    by_embed: dict[int, list[tuple[EmbedSlot, TranslationResult]]] = {}
    for slot, result in lookup.items():
        if isinstance(slot, EmbedSlot):
            by_embed.setdefault(slot.embed_index, []).append((slot, result))

    embeds = []
    for embed_index, original_embed in enumerate(original.embeds):
        overlays = by_embed.get(embed_index)
        if overlays:
            embeds.append(rebuild_embed(original_embed, embed_index, overlays, target_lang))
        else:
            embeds.append(original_embed.copy())
    return Reassembly(body=body, embeds=embeds)
