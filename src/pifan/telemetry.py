import logging, tracemalloc
import psutil

MIB = 1024 * 1024

def start_tracing() -> None:
    if not tracemalloc.is_tracing():
        tracemalloc.start()

def log_memory_usage(logger: logging.Logger) -> None:
    """
    Process memory in MiB: traced Python allocations (zero unless
    start_tracing() ran), resident and virtual size.
    """
    current, peak = tracemalloc.get_traced_memory()
    mem = psutil.Process().memory_info()
    logger.info("Memory usage (allocated): %d", current // MIB)
    logger.info("Memory usage (peak allocated): %d", peak // MIB)
    logger.info("Memory usage (resident): %d", mem.rss // MIB)
    logger.info("Memory usage (virtual): %d", mem.vms // MIB)

def log_iteration(logger: logging.Logger, temp_c: int, pin_state: int) -> None:
    logger.info("CPU temperature: %d", temp_c)
    logger.info("GPIO pin state: %d", pin_state)
