"""Three ways to build a process-wide single instance."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from typing import Any

BUILD_TIME = time.strftime("%H:%M:%S")

_TOKEN = object()


class _NoCopy:
    """Copies of a singleton are the singleton itself."""

    def __copy__(self) -> Any:
        return self

    def __deepcopy__(self, memo: dict) -> Any:
        return self


class EagerSingleton(_NoCopy):
    """Instance created on first request under a lock."""

    _instance: EagerSingleton | None = None
    _lock = threading.Lock()

    def __init__(self, token: object = None) -> None:
        if token is not _TOKEN:
            raise TypeError("use EagerSingleton.get_instance()")
        sys.stdout.write("SingleInstace 饿汉模式\n")

    @staticmethod
    def get_instance() -> EagerSingleton:
        with EagerSingleton._lock:
            if EagerSingleton._instance is None:
                EagerSingleton._instance = EagerSingleton(_TOKEN)
            return EagerSingleton._instance


class LazyLogger(_NoCopy):
    """Lazily created logger, initialised exactly once."""

    _instance: LazyLogger | None = None
    _once = threading.Lock()

    def __init__(self, token: object = None) -> None:
        if token is not _TOKEN:
            raise TypeError("use LazyLogger.get_instance()")
        sys.stdout.write("SingleInstaceLazy 懒汉模式\n")

    @staticmethod
    def _init() -> None:
        sys.stdout.write("0\n")
        if LazyLogger._instance is None:
            LazyLogger._instance = LazyLogger(_TOKEN)

    @staticmethod
    def get_instance() -> LazyLogger:
        if LazyLogger._instance is None:
            with LazyLogger._once:
                if LazyLogger._instance is None:
                    LazyLogger._init()
        return LazyLogger._instance

    def print_log(self, msg: str) -> str:
        """Write ``msg`` prefixed with the build time and return the line."""
        line = f"{BUILD_TIME} {msg}"
        sys.stdout.write(line + "\n")
        return line


class CheckedSingleton(_NoCopy):
    """Instance created with double-checked locking."""

    _instance: CheckedSingleton | None = None
    _lock = threading.Lock()

    def __init__(self, token: object = None) -> None:
        if token is not _TOKEN:
            raise TypeError("use CheckedSingleton.get_instance()")

    @staticmethod
    def get_instance() -> CheckedSingleton:
        if CheckedSingleton._instance is not None:
            return CheckedSingleton._instance
        with CheckedSingleton._lock:
            if CheckedSingleton._instance is None:
                CheckedSingleton._instance = CheckedSingleton(_TOKEN)
            return CheckedSingleton._instance


def _print_error() -> None:
    LazyLogger.get_instance().print_log("error")


def main(argv: Sequence[str] | None = None) -> int:
    EagerSingleton.get_instance()
    threads = [threading.Thread(target=_print_error) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())