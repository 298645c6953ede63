# ./utils/host_memory.py

import psutil
from typing import Union
from cache_options.exceptions import InvalidArgumentError
from cache_options.settings.memory_settings import MemorySettings
from cache_options.utils.logger import setup_logger
from cache_options.utils.memory_size import normalize_memory_limit

host_logger = setup_logger(__name__)

UNLIMITED = -1


def get_host_memory_limit() -> Union[str, int]:
    """
    Query the memory limit the host reports for this process.

    `MEMORY_LIMIT` (environment or `.env`) wins when set to a valid memory limit and is
    returned verbatim. Otherwise, or when it cannot be parsed, the soft address-space
    rlimit of the current process is used.

    Returns:
        Union[str, int]: The reported limit, or -1 when the host reports no limit.
    """
    configured = MemorySettings().memory_limit
    if configured is not None:
        try:
            normalize_memory_limit(configured)
        except InvalidArgumentError:
            host_logger.warning(f"Ignoring invalid MEMORY_LIMIT '{configured}'; probing the process rlimit.")
        else:
            host_logger.debug(f"Host memory limit from MEMORY_LIMIT: {configured}")
            return configured

    try:
        soft, _ = psutil.Process().rlimit(psutil.RLIMIT_AS)
        infinity = psutil.RLIM_INFINITY
    except AttributeError:
        # rlimit is only exposed on Linux and FreeBSD
        host_logger.debug("Process rlimit unavailable on this platform; treating memory as unlimited.")
        return UNLIMITED

    if soft == infinity or soft < 0:
        return UNLIMITED

    host_logger.debug(f"Host memory limit from RLIMIT_AS: {soft}")
    return soft
