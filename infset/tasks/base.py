import logging
from typing import Optional


class LoggedTask:
    """Base of the tasks that report their progress through a logger.

    Without an explicit logger, the task logs to a module-level logger and
    makes sure some handler prints its messages.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        if logger is None:
            logger = logging.getLogger(self.__class__.__module__)
            if not logging.getLogger().handlers:
                logging.basicConfig(format="%(message)s")
            logger.setLevel(logging.INFO)
        self.log = logger
