from urllib.parse import urlparse

__all__ = ('is_url', 'trim_quotes')

QUOTE_CHARACTERS = '"\''


def is_url(text):
    try:
        result = urlparse(text)
        return all([result.scheme, result.netloc])
    except ValueError:
        return False


def trim_quotes(value) -> str:
    """Strip whitespace and any surrounding quote characters from a setting value."""
    return str(value).strip().strip(QUOTE_CHARACTERS)
