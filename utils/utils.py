import re
from typing import List, Tuple
from .logger import logger

URL_PREFIXES = ("https://www.", "http://www.", "https://", "http://")

# Match either strings in quotes (with spaces and stuff) or single words
ARGS_REGEX = re.compile(r'("[^"]*")|(\S+)')

def strip_protocol(url: str) -> str:
    """
    Strip the protocol and a leading 'www.' from a URL, so that sorting by URL
    groups 'https://www.example.com' together with 'example.com'.
    """
    for prefix in URL_PREFIXES:
        if url.startswith(prefix):
            return url[len(prefix):]
    return url

def parse_args(args: str) -> List[str]:
    """
    Tokenize command arguments on whitespace.
    Double-quoted strings are kept as a single argument with the quotes stripped,
    empty tokens are discarded.
    """
    tokens = []
    for match in ARGS_REGEX.finditer(args):
        token = match.group(0)
        if len(token) > 1 and token.startswith('"') and token.endswith('"'):
            token = token[1:-1]
        elif token == '"':
            token = ""
        if token:
            tokens.append(token)
    return tokens

def split_command(command: str) -> Tuple[str, List[str]]:
    """
    Split raw command input on the first space into the action and its arguments.
    Returns: (action, args)
    """
    action, _, rest = command.partition(" ")
    args = parse_args(rest)
    logger.debug(f"Parsed command | Action: {action} | Args: {args}")
    return action, args
