from typing import Iterable


def join_words(items: Iterable, delimiter: str = ", ", conjunction: str = "and") -> str:
    """
    Join items into a grammatical list.

    >>> join_words([1, 2, 3], conjunction="or")
    '1, 2, or 3'
    >>> join_words(["Ace of Hearts", "7 of Clubs"])
    'Ace of Hearts and 7 of Clubs'

    :param items: The items to join; each is converted with str().
    :param delimiter: Separator placed between items when there are three or more.
    :param conjunction: Word placed before the final item.
    :return: The joined string, or an empty string for no items.
    """
    words = [str(item) for item in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {conjunction} {words[1]}"
    return f"{delimiter.join(words[:-1])}{delimiter}{conjunction} {words[-1]}"
