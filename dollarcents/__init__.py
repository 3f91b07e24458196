VERSION = '0.1.0'

from dollarcents.dollars import Dollars, ParseError  # noqa: E402

__all__ = ['VERSION', 'Dollars', 'ParseError']
