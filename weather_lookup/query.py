from itertools import islice
from typing import Iterable


def collect_keyword(argv: Iterable[str]) -> str:
    """
    Build the search keyword from an argument vector.

    The first element is the program name and is skipped. The remaining
    arguments are joined in order with no separator, so ["prog", "san",
    "francisco"] gives "sanfrancisco".
    """
    return "".join(islice(argv, 1, None))
