#
# zipl_logging.py: Support for logging to multiple destinations with log
# levels.
#
# Copyright (C) 2026 Red Hat, Inc.
#
# This copyrighted material is made available to anyone wishing to use,
# modify, copy, or redistribute it subject to the terms and conditions of
# the GNU General Public License v.2, or (at your option) any later version.
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY expressed or implied, including the implied warranties of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.  You should have received a copy of the
# GNU General Public License along with this program; if not, write to the
# Free Software Foundation, Inc., 31 Milk Street #960789 Boston, MA
# 02196 USA.  Any Red Hat trademarks that are incorporated in the
# source code or documentation are not subject to the GNU General Public
# License and may only be used or replicated with the express permission of
# Red Hat, Inc.
#
import logging
import sys
import warnings
from threading import Lock

from systemd import journal

from pyzipl.core import constants
from pyzipl.core.path import set_mode

ENTRY_FORMAT = "%(asctime)s,%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# the pyzipl log uses structured logging
ZIPL_ENTRY_FORMAT = "%(asctime)s,%(msecs)03d %(levelname)s %(log_prefix)s: %(message)s"
ZIPL_SYSLOG_FORMAT = "pyzipl: %(log_prefix)s: %(message)s"

program_log_lock = Lock()


class ZiplJournalHandler(journal.JournalHandler):
    def __init__(self, tag='', identifier=constants.JOURNAL_IDENTIFIER):
        self.tag = tag
        journal.JournalHandler.__init__(self, SYSLOG_IDENTIFIER=identifier)

    def emit(self, record):
        if self.tag:
            original_msg = record.msg
            record.msg = '%s: %s' % (self.tag, original_msg)
            journal.JournalHandler.emit(self, record)
            record.msg = original_msg
        else:
            journal.JournalHandler.emit(self, record)


class ZiplFileHandler(logging.FileHandler):
    def __init__(self, file_dest):
        logging.FileHandler.__init__(self, file_dest)

        set_mode(file_dest)


class ZiplPrefixFilter(logging.Filter):
    """Add a log_prefix field, which is based on the name property,
    but without the "zipl." prefix.

    Messages going to the generic "zipl" logger get the prefix "misc".
    """

    def filter(self, record):
        record.log_prefix = ""
        if record.name:
            if record.name == constants.LOGGER_ZIPL_ROOT:
                record.log_prefix = "misc"
            elif record.name.startswith(constants.LOGGER_ZIPL_ROOT + "."):
                record.log_prefix = record.name[len(constants.LOGGER_ZIPL_ROOT) + 1:]
        return True


class ZiplLog:

    def __init__(self, log_file=None, program_log_file=None, write_to_journal=False,
                 log_stream=sys.stderr, debug=False):
        self.write_to_journal = write_to_journal
        # Rename the loglevels so they are the same as in syslog.
        logging.addLevelName(logging.CRITICAL, "CRT")
        logging.addLevelName(logging.ERROR, "ERR")
        logging.addLevelName(logging.WARNING, "WRN")
        logging.addLevelName(logging.INFO, "INF")
        logging.addLevelName(logging.DEBUG, "DBG")

        # Create the base of the logger hierarchy.
        self.zipl_logger = logging.getLogger(constants.LOGGER_ZIPL_ROOT)
        self.zipl_logger.propagate = False
        self.zipl_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        warnings.showwarning = self.showwarning

        if log_file:
            self.addFileHandler(log_file, self.zipl_logger,
                                fmtStr=ZIPL_ENTRY_FORMAT,
                                log_filter=ZiplPrefixFilter())
        if log_stream:
            self.addFileHandler(log_stream, self.zipl_logger,
                                fmtStr=ZIPL_ENTRY_FORMAT,
                                log_filter=ZiplPrefixFilter())

        self.forwardToJournal(self.zipl_logger,
                              log_filter=ZiplPrefixFilter(),
                              log_formatter=logging.Formatter(ZIPL_SYSLOG_FORMAT))

        # External program output log
        program_logger = logging.getLogger(constants.LOGGER_PROGRAM)
        program_logger.propagate = False
        program_logger.setLevel(logging.DEBUG)

        if program_log_file:
            self.addFileHandler(program_log_file, program_logger)

        self.forwardToJournal(program_logger)

    # Add a simple handler - file or stream, depending on what we're given.
    def addFileHandler(self, dest, addToLogger, fmtStr=ENTRY_FORMAT, log_filter=None):
        try:
            if isinstance(dest, str):
                logfile_handler = ZiplFileHandler(dest)
            else:
                logfile_handler = logging.StreamHandler(dest)

            if log_filter:
                logfile_handler.addFilter(log_filter)

            logfile_handler.setFormatter(logging.Formatter(fmtStr, DATE_FORMAT))
            addToLogger.addHandler(logfile_handler)
        except OSError:
            pass

    def forwardToJournal(self, logr, log_formatter=None, log_filter=None):
        """Forward everything that goes in the logger to the journal daemon."""
        # Custom formatters add the tag themselves.
        if not self.write_to_journal:
            return

        if log_formatter:
            tag = None
        else:
            tag = logr.name
        journal_handler = ZiplJournalHandler(tag=tag)
        journal_handler.setLevel(logging.DEBUG)
        if log_filter:
            journal_handler.addFilter(log_filter)
        if log_formatter:
            journal_handler.setFormatter(log_formatter)
        logr.addHandler(journal_handler)

    # pylint: disable=redefined-builtin
    def showwarning(self, message, category, filename, lineno,
                    file=sys.stderr, line=None):
        """ Make sure messages sent through python's warnings module get logged."""
        self.zipl_logger.warning("%s", warnings.formatwarning(
                                 message, category, filename, lineno, line))


def init(write_to_journal=None, log_stream=sys.stderr):
    """Set up the logging from the configuration.

    :param write_to_journal: override of the configured journal forwarding
    :param log_stream: a stream for logging or None
    """
    # Import here to avoid an import loop with the configuration.
    from pyzipl.core.configuration.pyzipl import conf

    global logger

    if write_to_journal is None:
        write_to_journal = conf.main.write_to_journal

    logger = ZiplLog(
        log_file=conf.main.log_file or None,
        program_log_file=conf.main.program_log_file or None,
        write_to_journal=write_to_journal,
        log_stream=log_stream,
        debug=conf.main.debug
    )


logger = None
