#!/usr/bin/env python

import sys

from infset.config.sets_from_config_reader import SetsFromConfigReader
from infset.expression import parse_expression
from infset.factories.allowed_ids_factory import AllowedIdsFactory
from infset.scripts import CommandLineApp
from infset.tasks.membership_filter_task import MembershipFilterTask


class FilterLinesApp(CommandLineApp):
    """\
    Usage: %prog [options] [input_file]...

    Filters the lines of tabular input files, keeping only those whose key
    column is a member of a set. The set is given as an expression of
    names combined with + and -, where ALL stands for every possible name;
    for instance, ALL-HMMPanther-Gene3D keeps every line except the ones
    whose key is HMMPanther or Gene3D.

    The set may be further restricted to the IDs listed in a file and to
    a named set from the [infset:sets] section of the configuration file.

    Lines are read from the given files or from the standard input and
    the selected ones are printed to the standard output.
    """

    short_name = "infset_filter"

    def create_parser(self):
        """Creates the command line parser used by this script"""
        parser = super(FilterLinesApp, self).create_parser()
        parser.add_option("-e", "--expression", dest="expression",
                          metavar="EXPR",
                          help="keep lines whose key is a member of the "
                               "set described by EXPR. Default: %default",
                          config_key="infset:filter/expression",
                          default="ALL")
        parser.add_option("-n", "--named-set", dest="named_set",
                          metavar="NAME",
                          help="also require the key to be a member of the "
                               "set NAME of the configuration file",
                          config_key="infset:filter/named_set",
                          default=None)
        parser.add_option("-i", "--ids", dest="ids_file", metavar="FILE",
                          help="only consider those IDs which are present "
                               "in the list in the given FILE",
                          config_key="infset:filter/ids_file",
                          default=None)
        parser.add_option("-k", "--column", dest="column", metavar="N",
                          type=int, default=1,
                          help="use column N (starting from 1) as the key. "
                               "Default: %default")
        parser.add_option("-s", "--separator", dest="separator",
                          metavar="SEP", default="\t",
                          help="column separator. Default: tab")
        parser.add_option("-v", "--invert", dest="invert",
                          action="store_true", default=False,
                          help="keep the lines whose key is NOT a member")
        return parser

    def _check_args(self) -> None:
        if not self.args:
            self.args = ["-"]
        if self.options.column < 1:
            self.error("column numbers start from 1")

    def _get_members(self):
        try:
            members = parse_expression(self.options.expression)
        except ValueError as ex:
            self.error("invalid expression: %s" % ex)
        if self.options.named_set:
            reader = SetsFromConfigReader(self.parser.config, self.log)
            try:
                members &= reader.get_set(self.options.named_set)
            except KeyError:
                self.error("no set named %s in the configuration"
                           % self.options.named_set)
            except ValueError as ex:
                self.error("invalid set in the configuration: %s" % ex)

        members &= AllowedIdsFactory(self.log, self.options.ids_file).get()
        return members

    def run_real(self):
        """Runs the application"""
        self._check_args()
        members = self._get_members()
        self.log.debug("Filtering with %r" % members)

        task = MembershipFilterTask(self.log)
        for infile in self.args:
            task.process_file(infile, members,
                              column=self.options.column - 1,
                              separator=self.options.separator,
                              invert=self.options.invert)


def main():
    return FilterLinesApp().run()


if __name__ == "__main__":
    sys.exit(main())
