import logging
from configparser import ConfigParser
from typing import Dict, List, Optional

from infset.expression import ALL_TOKEN, parse_expression
from infset.infinite_set import InfiniteSet

DEFAULT_SECTION = "infset:sets"


class SetsFromConfigReader:
    """Reads named set expressions from a configuration file.

    Every option of the ``infset:sets`` section is taken as a set
    expression (see `parse_expression`), e.g.::

        [infset:sets]
        trusted = ALL-HMMPanther-Gene3D
        novel = Novel
        stages.1 = ALL-HMMPanther-Gene3D
        stages.2 = ALL

    Keys named ``stages.1``, ``stages.2`` and so on are also available as
    an ordered list through `get_stages`.
    """

    def __init__(self, config: Optional[ConfigParser],
                 log: Optional[logging.Logger] = None,
                 section: str = DEFAULT_SECTION,
                 defaults: Optional[Dict[str, str]] = None,
                 all_token: str = ALL_TOKEN):
        self.config = config
        self.log = log or logging.getLogger(__name__)
        self.section = section
        if defaults is None:
            defaults = {"default": all_token}
        self.defaults = defaults
        self.all_token = all_token
        self._sets_read: bool = False
        self._sets_from_config: Dict[str, InfiniteSet[str]]

    def get_sets(self) -> Dict[str, InfiniteSet[str]]:
        """Returns every named set of the section, in file order. The
        defaults given at construction time are used when there is no
        configuration or it lacks the section."""
        if not self._sets_read:
            self._sets_from_config = self._get_sets_from_config()
            self._sets_read = True
        return {name: members.copy()
                for name, members in self._sets_from_config.items()}

    def get_set(self, name: str) -> InfiniteSet[str]:
        """Returns the set configured under `name`

        Raises
        ------
        KeyError
            if no set is configured under that name
        """
        sets = self.get_sets()
        if name not in sets:
            raise KeyError("no set named %r in section %s"
                           % (name, self.section))
        return sets[name]

    def get_stages(self) -> List[InfiniteSet[str]]:
        """Returns the sets configured as ``stages.1``, ``stages.2`` and so
        on, stopping at the first missing index"""
        sets = self.get_sets()
        stages, idx = [], 1
        while "stages.%d" % idx in sets:
            stages.append(sets["stages.%d" % idx])
            idx += 1
        return stages

    def _get_expressions_from_config(self) -> Dict[str, str]:
        cfg = self.config
        if cfg is None or not cfg.has_section(self.section):
            self.log.debug("No [%s] section found, using default sets"
                           % self.section)
            return dict(self.defaults)
        return {name: cfg.get(self.section, name)
                for name in cfg.options(self.section)}

    def _get_sets_from_config(self) -> Dict[str, InfiniteSet[str]]:
        expressions = self._get_expressions_from_config()
        sets = {}
        for name, expression in expressions.items():
            self.log.debug("Set %s = %s" % (name, expression))
            sets[name] = parse_expression(expression, self.all_token)
        return sets
