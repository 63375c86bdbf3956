"""Tests for gamestate_api.collectors.psutil_source."""

from __future__ import annotations

from collections import namedtuple
from unittest.mock import patch

from gamestate_api.collectors.psutil_source import PsutilCounterSource

scputimes_win = namedtuple("scputimes", ["user", "system", "idle", "interrupt", "dpc"])
scputimes_linux = namedtuple("scputimes", ["user", "nice", "system", "idle", "iowait"])
svmem = namedtuple("svmem", ["total", "available", "percent", "used", "free"])


class TestPsutilCounterSource:
    def test_windows_style_cpu_times(self):
        with patch("gamestate_api.collectors.psutil_source.psutil") as mock_psutil:
            mock_psutil.cpu_times.return_value = scputimes_win(100.0, 50.0, 800.0, 5.0, 5.0)
            mock_psutil.virtual_memory.return_value = svmem(16 * 1024**3, 10 * 1024**3, 37.5, 0, 0)
            mock_psutil.boot_time.return_value = 0.0
            sample = PsutilCounterSource().read()

        assert sample.idle_ticks == 800.0
        assert sample.total_ticks == 960.0
        assert sample.total_memory == 16 * 1024**3
        assert sample.available_memory == 10 * 1024**3
        assert sample.uptime_seconds > 0

    def test_iowait_counts_as_idle(self):
        with patch("gamestate_api.collectors.psutil_source.psutil") as mock_psutil:
            mock_psutil.cpu_times.return_value = scputimes_linux(10.0, 0.0, 5.0, 70.0, 15.0)
            idle, total = PsutilCounterSource().read_cpu()

        assert idle == 85.0
        assert total == 100.0

    def test_failing_call_blanks_only_its_group(self):
        with patch("gamestate_api.collectors.psutil_source.psutil") as mock_psutil:
            mock_psutil.cpu_times.side_effect = RuntimeError("no access")
            mock_psutil.virtual_memory.return_value = svmem(1024, 512, 50.0, 512, 512)
            mock_psutil.boot_time.side_effect = OSError("no boot time")
            sample = PsutilCounterSource().read()

        assert sample.has_cpu is False
        assert sample.total_memory == 1024
        assert sample.available_memory == 512
        assert sample.uptime_seconds is None

    def test_real_system_counters(self):
        sample = PsutilCounterSource().read()
        assert sample.total_ticks is not None and sample.total_ticks > 0
        assert sample.total_memory is not None and sample.total_memory > 0

    def test_guest_time_not_counted_twice(self):
        scputimes_guest = namedtuple(
            "scputimes",
            ["user", "nice", "system", "idle", "iowait", "irq", "softirq", "steal", "guest", "guest_nice"],
        )
        with patch("gamestate_api.collectors.psutil_source.psutil") as mock_psutil:
            mock_psutil.cpu_times.return_value = scputimes_guest(30.0, 5.0, 10.0, 50.0, 5.0, 0.0, 0.0, 0.0, 20.0, 3.0)
            idle, total = PsutilCounterSource().read_cpu()

        assert idle == 55.0
        assert total == 100.0
