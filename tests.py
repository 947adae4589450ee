import unittest
import doctest

from numberlines import channel
from numberlines import ranges
from numberlines import ticks
from numberlines import utils
from numberlines.linked import construct as linked_construct
from numberlines.widgets import colorscheme
from numberlines.widgets import utils as widgets_utils


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(channel))
    tests.addTests(doctest.DocTestSuite(ranges))
    tests.addTests(doctest.DocTestSuite(ticks))
    tests.addTests(doctest.DocTestSuite(linked_construct))
    tests.addTests(doctest.DocTestSuite(widgets_utils))
    tests.addTests(doctest.DocTestSuite(colorscheme))

    return tests


if __name__ == '__main__':
    unittest.main()
