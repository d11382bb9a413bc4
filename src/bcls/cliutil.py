import os
import sys


def handle_broken_pipe(*, exit_code):
    # According to the official Python doc: https://docs.python.org/3/library/signal.html#note-on-sigpipe
    # Python flushes standard streams on exit; redirect remaining output
    # to devnull to avoid another BrokenPipeError at shutdown
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    sys.exit(exit_code)  # Python exits with error code 1 on EPIPE
