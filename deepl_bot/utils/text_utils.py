# Discord embed limits
TITLE_LIMIT = 256
DESCRIPTION_LIMIT = 4096
AUTHOR_NAME_LIMIT = 256
FOOTER_TEXT_LIMIT = 2048
FIELD_NAME_LIMIT = 256
FIELD_VALUE_LIMIT = 1024
MAX_EMBEDS = 10
MAX_TOTAL_EMBED_CHARS = 6000


def truncate(text, max_length):
    """Cut text to max_length characters, marking the cut with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"
