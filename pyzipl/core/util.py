#
# util.py - generic utility functions
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
import functools
import os
import signal
import subprocess

from pyzipl.core.constants import DEFAULT_LANG
from pyzipl.zipl_logging import program_log_lock
from pyzipl.zipl_loggers import get_module_logger, get_program_logger

log = get_module_logger(__name__)
program_log = get_program_logger()

__all__ = ["startProgram", "execProgram"]


def startProgram(argv, root='/', stdin=None, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
                 env_prune=None, env_add=None, reset_handlers=True, reset_lang=True, **kwargs):
    """ Start an external program and return the Popen object.

        The tools are looked up in $PATH. Nothing is run in a chroot,
        the root argument only sets the working directory of the child.

        :param argv: The command to run and argument
        :param root: The working directory of the command.
        :param stdin: The file object to read stdin from.
        :param stdout: The file object to write stdout to.
        :param stderr: The file object to write stderr to.
        :param env_prune: environment variables to remove before execution
        :param env_add: environment variables to add before execution
        :param reset_handlers: whether to reset to SIG_DFL any signal handlers set to SIG_IGN
        :param reset_lang: whether to set the locale of the child process to C
        :param kwargs: Additional parameters to pass to subprocess.Popen
        :return: A Popen object for the running command.
    """
    with program_log_lock:
        program_log.info("Running... %s", " ".join(argv))

    env = os.environ.copy()
    for var in env_prune or []:
        env.pop(var, None)

    if reset_lang:
        env.update({"LC_ALL": DEFAULT_LANG})

    if env_add:
        env.update(env_add)

    def preexec():
        # Signal handlers set to SIG_IGN persist across exec. Reset
        # these to SIG_DFL if requested.
        if reset_handlers:
            for signum in range(1, signal.NSIG):
                if signal.getsignal(signum) == signal.SIG_IGN:
                    signal.signal(signum, signal.SIG_DFL)

    # pylint: disable=subprocess-popen-preexec-fn
    partsubp = functools.partial(subprocess.Popen,
                                 argv,
                                 stdin=stdin,
                                 stdout=stdout,
                                 stderr=stderr,
                                 close_fds=True,
                                 restore_signals=reset_handlers,
                                 cwd=root, env=env, **kwargs)

    return partsubp(preexec_fn=preexec)


def _decode(data, replace_utf_decode_errors):
    return data.decode(
        "utf-8",
        errors="strict" if not replace_utf_decode_errors else "replace"
    )


def _run_program(argv, root='/', stdin=None, env_prune=None, env_add=None,
                 replace_utf_decode_errors=False, log_output=True, filter_stderr=False):
    """ Run an external program, log the output and return it to the caller

        :param argv: The command to run and argument
        :param root: The working directory of the command.
        :param stdin: The file object to read stdin from.
        :param env_prune: environment variable to remove before execution
        :param env_add: environment variables added for the execution
        :param replace_utf_decode_errors: whether to substitute the decoding errors
        :param log_output: whether to log the output of command
        :param filter_stderr: whether to capture stderr separately from the output
        :return: The return code of the command, the output and the error output
    """
    try:
        if filter_stderr:
            stderr = subprocess.PIPE
        else:
            stderr = subprocess.STDOUT

        proc = startProgram(argv, root=root, stdin=stdin, stdout=subprocess.PIPE,
                            stderr=stderr, env_prune=env_prune, env_add=env_add)

        (output_data, err_data) = proc.communicate()
        output_string = _decode(output_data, replace_utf_decode_errors)
        err_string = _decode(err_data or b"", replace_utf_decode_errors)

        if log_output:
            with program_log_lock:
                for line in output_string.splitlines():
                    program_log.info(line.strip())

                for line in err_string.splitlines():
                    program_log.info(line.strip())

    except OSError as e:
        with program_log_lock:
            program_log.error("Error running %s: %s", argv[0], e.strerror)
        raise

    with program_log_lock:
        program_log.debug("Return code of %s: %d", argv[0], proc.returncode)

    return (proc.returncode, output_string, err_string)


def execProgram(command, argv, stdin=None, root='/', env_prune=None, env_add=None,
                log_output=True):
    """ Run an external program and capture its return code, standard out and err.

        This is the single seam all external tools of the boot loader
        backends are run through. Bytes of the output that are not valid
        UTF-8 are replaced.

        :param command: The command to run
        :param argv: The argument list
        :param stdin: The file object to read stdin from.
        :param root: The working directory of the command.
        :param env_prune: environment variable to remove before execution
        :param env_add: environment variables added for the execution
        :param log_output: Whether to log the output of command
        :return: Tuple of the return code, the output and the error output
    """
    argv = [command] + argv
    return _run_program(argv, stdin=stdin, root=root, env_prune=env_prune,
                        env_add=env_add, replace_utf_decode_errors=True,
                        log_output=log_output, filter_stderr=True)
