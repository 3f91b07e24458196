import os

DOLLARCENTS_BASE_PATH = os.path.join(os.path.expanduser("~"), 'DollarCents')


def define_cli_args(parser):
    # Input:
    parser.add_argument(
        'amounts', nargs='*', type=str,
        help=('Zero or more amounts to parse, e.g. "$12.34", "-$0.01" or '
              '"+5". Negative amounts may need a leading "--" to stop option '
              'parsing. Each is parsed exactly as given: unlike '
              '--amounts_file lines, whitespace is not stripped and "#" does '
              'not start a comment.'))
    parser.add_argument(
        '--amounts_file', type=str, default=None,
        help=('A UTF-8 text file with one amount per line. Blank lines and '
              'lines starting with "#" are skipped.'))

    # Output:
    parser.add_argument(
        '--width', type=int,
        default=0,
        help=('Right-align each printed amount to this many columns.'))
    parser.add_argument(
        '--total_only', action='store_true',
        help=('Only print the total, not each parsed amount.'))
    parser.add_argument(
        '--strict', action='store_true',
        help=('Exit with an error if any amount fails to parse. By default '
              'unparseable amounts are reported and left out of the total.'))

    # Logging:
    parser.add_argument(
        '--log_path', type=str, default=None,
        help=('Also write a debug log file into this directory. Off by '
              'default. Example: ' + os.path.join(DOLLARCENTS_BASE_PATH, 'Logs')))

    parser.add_argument(
        '--check_outdated', action='store_true',
        help='Check PyPI for a newer release before running.')
    parser.add_argument(
        '-V', '--version', action='store_true',
        help='Shows the app version and quits.')
