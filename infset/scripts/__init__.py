"""Command line applications built on top of `infset`.

Every application is a subclass of `CommandLineApp`, which takes care of
parsing the command line, reading the optional configuration file and
setting up logging. Subclasses extend `create_parser` with their own
options and implement `run_real`.
"""

import logging
import sys
import textwrap
from configparser import ConfigParser
from optparse import Option, OptionParser

__all__ = ["CommandLineApp", "CommandLineParser", "ConfigOption"]


class ConfigOption(Option):
    """`optparse` option that may take its default value from the
    configuration file. `config_key` is either ``section/key`` or a plain
    ``key`` looked up in the ``DEFAULT`` section."""

    ATTRS = Option.ATTRS + ["config_key"]


class CommandLineParser(OptionParser):
    """Option parser aware of the configuration file of the application"""

    def __init__(self, *args, **kwds):
        kwds.setdefault("option_class", ConfigOption)
        OptionParser.__init__(self, *args, **kwds)
        self.config = None

    def load_config(self, config_file: str) -> ConfigParser:
        """Reads `config_file` and uses its values as the defaults of the
        options having a `config_key`"""
        config = ConfigParser()
        with open(config_file) as fp:
            config.read_file(fp)
        self.config = config
        for option in self._get_all_options():
            value = self._get_config_value(option)
            if value is not None:
                self.defaults[option.dest] = value
        return config

    def _get_config_value(self, option: Option):
        key = getattr(option, "config_key", None)
        if not key or self.config is None:
            return None
        if "/" in key:
            section, key = key.split("/", 1)
        else:
            section = "DEFAULT"
        if not self.config.has_option(section, key):
            return None
        if option.action in ("store_true", "store_false"):
            return self.config.getboolean(section, key)
        value = self.config.get(section, key)
        if option.action == "append":
            return [value]
        return option.check_value(option.get_opt_string(), value)


class CommandLineApp:
    """Base class of the command line applications.

    The docstring of the subclass is used as the usage message.
    """

    short_name = None

    def create_parser(self) -> CommandLineParser:
        """Creates the command line parser used by this application"""
        parser = CommandLineParser(
            usage=textwrap.dedent(self.__class__.__doc__ or "").strip())
        parser.add_option("-c", "--config-file", dest="config_file",
                          metavar="FILE", default=None,
                          help="read configuration from FILE")
        parser.add_option("-d", "--debug", dest="debug",
                          action="store_true", default=False,
                          help="show debug messages")
        parser.add_option("-q", "--quiet", dest="quiet",
                          action="store_true", default=False,
                          help="only show warnings and errors")
        return parser

    def create_logger(self) -> logging.Logger:
        log = logging.getLogger(self.short_name or self.__class__.__name__)
        if not log.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(message)s"))
            log.addHandler(handler)
        log.propagate = False
        if self.options.debug:
            log.setLevel(logging.DEBUG)
        elif self.options.quiet:
            log.setLevel(logging.WARNING)
        else:
            log.setLevel(logging.INFO)
        return log

    def error(self, message: str) -> None:
        """Prints a usage error and exits with status 2"""
        self.parser.error(message)

    def run(self, args=None) -> int:
        """Parses `args` (the command line by default) and runs the
        application, returning its exit code"""
        self.parser = self.create_parser()
        self.options, self.args = self.parser.parse_args(args)
        if self.options.config_file:
            # the first pass may have appended to list defaults
            self.parser = self.create_parser()
            try:
                self.parser.load_config(self.options.config_file)
            except IOError as ex:
                self.error("cannot read config file: %s" % ex)
            self.options, self.args = self.parser.parse_args(args)

        self.log = self.create_logger()
        try:
            return self.run_real() or 0
        except KeyboardInterrupt:
            self.log.error("Interrupted")
            return 1

    def run_real(self):
        raise NotImplementedError("Abstract method")
