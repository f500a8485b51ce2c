import discord
from unittest.mock import MagicMock
from deepl_bot.translation.extractor import extract
from deepl_bot.translation.models import (
    BodySlot,
    EmbedPart,
    EmbedSlot,
    FieldPart,
    ListFieldRef,
)


def make_message(content="", embeds=None):
    message = MagicMock()
    message.content = content
    message.embeds = embeds or []
    return message


def field_slot(embed_index, field_index, part):
    return EmbedSlot(embed_index=embed_index, field=ListFieldRef(field_index=field_index, part=part))


def test_extract_empty_message():
    assert extract(make_message()) == []


def test_extract_ignores_embeds_without_text():
    image_only = discord.Embed(color=0xFF0000)
    image_only.set_image(url="https://example.com/image.png")
    assert extract(make_message("", [discord.Embed(), image_only])) == []


def test_extract_ignores_whitespace_body():
    assert extract(make_message("   \n")) == []


def test_extract_body_only():
    units = extract(make_message("Bonjour le monde"))
    assert len(units) == 1
    assert units[0].text == "Bonjour le monde"
    assert units[0].origin == BodySlot()


def test_extract_embed_title_and_field():
    embed = discord.Embed(title="Titre")
    embed.add_field(name="Nom", value="Valeur")
    units = extract(make_message("", [embed]))

    assert [u.origin for u in units] == [
        EmbedSlot(embed_index=0, field=EmbedPart.TITLE),
        field_slot(0, 0, FieldPart.NAME),
        field_slot(0, 0, FieldPart.VALUE),
    ]
    assert [u.text for u in units] == ["Titre", "Nom", "Valeur"]


def test_extract_order_across_body_and_embeds():
    first = discord.Embed(title="T0", description="D0")
    first.set_author(name="A0", icon_url="https://example.com/a.png")
    first.set_footer(text="F0")
    first.add_field(name="N0", value="V0")
    first.add_field(name="N1", value="V1")
    second = discord.Embed(description="D1")

    units = extract(make_message("body", [first, second]))

    assert [u.text for u in units] == ["body", "T0", "D0", "A0", "F0", "N0", "V0", "N1", "V1", "D1"]
    assert units[3].origin == EmbedSlot(embed_index=0, field=EmbedPart.AUTHOR_NAME)
    assert units[4].origin == EmbedSlot(embed_index=0, field=EmbedPart.FOOTER_TEXT)
    assert units[7].origin == field_slot(0, 1, FieldPart.NAME)
    assert units[-1].origin == EmbedSlot(embed_index=1, field=EmbedPart.DESCRIPTION)


def test_extract_embed_index_counts_skipped_embeds():
    embeds = [discord.Embed(), discord.Embed(title="Only")]
    units = extract(make_message("", embeds))
    assert units[0].origin == EmbedSlot(embed_index=1, field=EmbedPart.TITLE)


def test_extract_slots_are_unique_and_deterministic():
    embed = discord.Embed(title="Same", description="Same")
    embed.add_field(name="Same", value="Same")
    message = make_message("Same", [embed])

    first = extract(message)
    second = extract(message)

    assert first == second
    assert len({u.origin for u in first}) == len(first)
