import collections
import os
import threading
import time

import pytest

from pipeutils import system


def _in_thread(func):
    box = {}

    def runner():
        box["value"] = func()

    worker = threading.Thread(target=runner)
    worker.start()
    worker.join()
    return box["value"]


def test_exe_path_parts_join_back():
    for is_exe in (True, False):
        path = system.exe_path(is_exe)
        assert system.exe_dir(is_exe) + system.exe_name(is_exe) == path
        assert system.exe_dir(is_exe).endswith("/")
        assert "\\" not in path


def test_exe_path_exists():
    assert os.path.exists(system.exe_path())
    assert system.exe_name(False) == "system.py"


def test_gmt_off_matches_local_time():
    assert system.get_gmt_off() == (time.localtime().tm_gmtoff or 0)


def test_monotonic_clock_never_decreases():
    values = [system.current_millisecond() for _ in range(50)]
    assert values == sorted(values)
    assert values[0] >= 0


def test_monotonic_clock_advances():
    before = system.current_millisecond()
    time.sleep(0.02)
    after = system.current_millisecond()
    assert after - before >= 15


def test_system_clock_close_to_wall_time():
    now_ms = time.time() * 1000
    assert abs(system.current_millisecond(True) - now_ms) < 1000
    assert abs(system.current_microsecond(True) / 1000 - now_ms) < 1000


def test_microsecond_and_millisecond_agree():
    micro = system.current_microsecond()
    milli = system.current_millisecond()
    assert milli >= micro // 1000
    assert milli - micro // 1000 < 1000


def test_get_time_str_formats_local_time():
    stamp = 1_700_000_000
    assert system.get_time_str("%Y-%m-%d", stamp) == time.strftime(
        "%Y-%m-%d", time.localtime(stamp)
    )


def test_get_time_str_literal_format_kept():
    assert system.get_time_str("plain text", 5) == "plain text"


def test_get_time_str_default_is_now():
    year = system.get_time_str("%Y")
    assert year == time.strftime("%Y")


def test_get_local_time():
    assert system.get_local_time(0) == time.localtime(0)


def test_thread_name_round_trip():
    def work():
        system.set_thread_name("worker")
        return system.get_thread_name()

    assert _in_thread(work) == "worker"


def test_long_thread_name_is_shortened():
    name = "abcdefghijklmnopqrstuvwxyz"

    def work():
        system.set_thread_name(name)
        return system.get_thread_name()

    result = _in_thread(work)
    assert len(result) == 15
    assert result.startswith("abcde...")
    assert result.endswith(name[-7:])


def test_thread_name_none_rejected():
    with pytest.raises(ValueError):
        system.set_thread_name(None)


def test_thread_affinity_all_cpus():
    result = _in_thread(lambda: system.set_thread_affinity(-1))
    assert result == hasattr(os, "sched_setaffinity")


def test_thread_affinity_bad_cpu_fails():
    def work():
        outcome = system.set_thread_affinity(10**6)
        system.set_thread_affinity(-1)
        return outcome

    assert _in_thread(work) is False


def test_demangle():
    assert system.demangle("main") == "main"
    assert system.demangle(int) == "int"
    assert system.demangle(collections.OrderedDict) == "collections.OrderedDict"


def test_get_env(monkeypatch):
    monkeypatch.setenv("PIPEUTILS_SAMPLE", "value")
    assert system.get_env("PIPEUTILS_SAMPLE") == "value"
    assert system.get_env("$PIPEUTILS_SAMPLE") == "value"


def test_get_env_missing_and_empty(monkeypatch):
    monkeypatch.delenv("PIPEUTILS_MISSING", raising=False)
    assert system.get_env("PIPEUTILS_MISSING") == ""
    assert system.get_env("$") == ""
    assert system.get_env("") == ""