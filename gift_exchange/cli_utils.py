import logging

import coloredlogs

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def get_log_level(verbose: bool, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    # quiet keeps the warning about an unsatisfiable draw
    return logging.WARNING if quiet else logging.INFO


def setup_logging(verbose: bool, quiet: bool = False) -> int:
    assert not (verbose and quiet), "Cannot be both verbose and quiet"
    log_level = get_log_level(verbose, quiet)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    coloredlogs.install(level=log_level, fmt=LOG_FORMAT)
    return log_level
