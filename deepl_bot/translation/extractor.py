from typing import Optional
from deepl_bot.translation.models import (
    BodySlot,
    EmbedPart,
    EmbedSlot,
    FieldPart,
    ListFieldRef,
    TranslatableUnit,
)


def _has_text(text: Optional[str]) -> bool:
    return bool(text and text.strip())


def extract_embed(embed, embed_index: int) -> list[TranslatableUnit]:
    """Collect the text slots of a single embed in display order."""
    units = []
    scalars = [
        (EmbedPart.TITLE, embed.title),
        (EmbedPart.DESCRIPTION, embed.description),
        (EmbedPart.AUTHOR_NAME, embed.author.name),
        (EmbedPart.FOOTER_TEXT, embed.footer.text),
    ]
    for part, text in scalars:
        if _has_text(text):
            units.append(
                TranslatableUnit(text=text, origin=EmbedSlot(embed_index=embed_index, field=part))
            )

    for field_index, field in enumerate(embed.fields):
        for part, text in ((FieldPart.NAME, field.name), (FieldPart.VALUE, field.value)):
            if _has_text(text):
                ref = ListFieldRef(field_index=field_index, part=part)
                units.append(
                    TranslatableUnit(text=text, origin=EmbedSlot(embed_index=embed_index, field=ref))
                )
    return units


def extract(message) -> list[TranslatableUnit]:
    """Flatten a message into translatable units.

    The body comes first, followed by each embed in order. An empty list means
    there is nothing to translate.
    """
    units = []
    if _has_text(message.content):
        units.append(TranslatableUnit(text=message.content, origin=BodySlot()))

    for embed_index, embed in enumerate(message.embeds):
        units.extend(extract_embed(embed, embed_index))
    return units
