# -*- coding: utf-8 -*-
"""
Command line interface: format the numbers given as arguments, one per line.

    $ numrepr 3.14159 0.00002 --precision 2
    3.1
    2.0*10^(-5)
"""
import sys
import logging
import argparse
import contextlib

from numrepr.config import ConfigError, FormatOptions
from numrepr.floatformatting import RepresentationType


log = logging.getLogger(__name__)
root_log = logging.getLogger()


class App:
    """Class that processes the command line and drives the application."""

    options_class = FormatOptions

    def __init__(self, name='numrepr'):
        self.name = name

    @property
    def argparser(self):
        parser = argparse.ArgumentParser(prog=self.name,
                      description="Format numbers with a given amount of "
                                  "significant digits.")

        parser.add_argument('values', nargs='+', type=float,
                        help="numbers to format")

        parser.add_argument('-p', '--precision', type=int,
                        help="number of significant digits")

        representation = parser.add_mutually_exclusive_group()

        representation.add_argument('--latex', action='store_const',
                        dest='representation',
                        const=RepresentationType.LATEX,
                        help="produce LaTeX output")

        representation.add_argument('--plain', action='store_const',
                        dest='representation',
                        const=RepresentationType.PLAIN,
                        help="produce plain text output")

        parser.add_argument('--show-sign', default=None,
                        action=argparse.BooleanOptionalAction,
                        help="prepend '+' to positive numbers")

        parser.add_argument('--lim-inf', type=int,
                        help="use scientific notation below 10^LIM_INF")

        parser.add_argument('--lim-sup', type=int,
                        help="use scientific notation above 10^LIM_SUP")

        parser.add_argument('-c', '--config',
                        help="YAML file with the default options")

        loglevel = parser.add_mutually_exclusive_group()

        loglevel.add_argument('-q','--quiet', help="supress INFO messages",
                        action='store_true')

        loglevel.add_argument('-d', '--debug', help = "show debug info",
                          action='store_true')

        return parser

    def get_commandline_arguments(self, cmdline=None):
        args = vars(self.argparser.parse_args(cmdline))

        if args.get('quiet', False):
            level = logging.WARN
        elif args.get('debug', False):
            level = logging.DEBUG
        else:
            level = logging.INFO

        args['loglevel'] = level
        return args

    def init_logging(self, args):
        root_log.setLevel(args['loglevel'])
        if root_log.handlers:
            #Already configured by whoever is calling us.
            return
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[%(levelname)s]: %(message)s'))
        root_log.addHandler(handler)

    def init(self, cmdline=None):
        args = self.get_commandline_arguments(cmdline)
        self.init_logging(args)
        self.args = args

    def load_options(self):
        args = self.args
        config_file = args['config']
        if config_file is None:
            options = self.options_class()
        else:
            log.debug("Reading options from %s", config_file)
            with open(config_file) as f:
                options = self.options_class.from_yaml(f)
        return options.replace(precision=args['precision'],
                               show_sign=args['show_sign'],
                               lim_inf=args['lim_inf'],
                               lim_sup=args['lim_sup'],
                               representation=args['representation'])

    def run(self):
        try:
            options = self.load_options()
        except ConfigError as e:
            format_rich_error(e)
            sys.exit(1)
        except OSError as e:
            log.error("Could not open configuration file: %s", e)
            sys.exit(1)

        for value in self.args['values']:
            print(options.format(value))


def format_rich_error(e):
    with contextlib.redirect_stdout(sys.stderr):
        log.error("Bad configuration encountered:")
        print(e)

def main(cmdline=None):
    a = App()
    a.init(cmdline)
    a.run()

if __name__ == '__main__':
    main()
