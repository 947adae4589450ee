def rgba(red, green, blue, alpha=255):
    """
    A kivy colour (four components in [0, 1]) from 0-255 components.

    >>> rgba(255, 0, 51)
    [1.0, 0.0, 0.2, 1.0]
    """
    return [component / 255. for component in (red, green, blue, alpha)]


def with_alpha(color, alpha):
    """
    >>> with_alpha(rgba(255, 0, 51), 0.25)
    [1.0, 0.0, 0.2, 0.25]
    """
    return list(color[:3]) + [alpha]


WHITE = rgba(255, 255, 255)
BLACK = rgba(0, 0, 0)
CUTTY_SARK = rgba(88, 110, 117)
CURIOUS_BLUE = rgba(38, 141, 210)
TRANSLUCENT_BLUE = with_alpha(CURIOUS_BLUE, 0.25)
OLD_LACE = rgba(253, 246, 229)
