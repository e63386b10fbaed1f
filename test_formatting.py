#!/usr/bin/env python3
"""
Test Suite for docker-dx formatting helpers

Covers duration and size labels, the two string shorteners, port lists and
container state labels.

Usage:
  pytest test_formatting.py
"""

import unittest
from datetime import datetime, timedelta, timezone

from docker_dx.models.summaries import ContainerState, PortBinding
from docker_dx.utils.formatting import (
    age_since,
    format_ports,
    pretty_duration,
    shorten,
    shorten_bytes,
    shorten_middle,
    state_label,
)


NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestPrettyDuration(unittest.TestCase):
    """Duration buckets"""

    def assertDuration(self, seconds, expected):
        self.assertEqual(pretty_duration(timedelta(seconds=seconds)), expected)

    def test_boundaries(self):
        """Boundary values land in the expected bucket"""
        self.assertDuration(0, "now")
        self.assertDuration(0.9, "now")
        self.assertDuration(1, "1s")
        self.assertDuration(59, "59s")
        self.assertDuration(60, "1m")
        self.assertDuration(3599, "59m")
        self.assertDuration(3600, "1h")

    def test_hours_switch_to_days_at_two_days(self):
        """Hours are shown up to two days"""
        self.assertDuration(2 * 86400 - 1, "47h")
        self.assertDuration(2 * 86400, "2d")

    def test_larger_units(self):
        """Weeks, 30-day months and 365-day years"""
        self.assertDuration(14 * 86400 - 1, "13d")
        self.assertDuration(14 * 86400, "2w")
        self.assertDuration(60 * 86400 - 1, "8w")
        self.assertDuration(60 * 86400, "2M")
        self.assertDuration(730 * 86400 - 1, "24M")
        self.assertDuration(730 * 86400, "2y")
        self.assertDuration(3650 * 86400, "10y")

    def test_negative_duration_is_now(self):
        """Clock skew never crashes"""
        self.assertDuration(-30, "now")

    def test_age_since_unknown(self):
        """Missing timestamps render a placeholder"""
        self.assertEqual(age_since(None, NOW), "?")
        self.assertEqual(age_since(NOW - timedelta(minutes=5), NOW), "5m")


class TestShortenBytes(unittest.TestCase):
    """Binary size labels"""

    def test_examples(self):
        self.assertEqual(shorten_bytes(0), "0")
        self.assertEqual(shorten_bytes(1023), "1023")
        self.assertEqual(shorten_bytes(1024), "1.0kB")
        self.assertEqual(shorten_bytes(1536), "1.5kB")
        self.assertEqual(shorten_bytes(1024 ** 2), "1.0MB")
        self.assertEqual(shorten_bytes(5 * 1024 ** 3), "5.0GB")
        self.assertEqual(shorten_bytes(77 * 1024 ** 4 // 10), "7.7TB")

    def test_units_never_go_down(self):
        """Units are monotonic as the size grows"""
        units = "kMGTPE"
        last = -1
        for exponent in range(1, 7):
            for factor in (1, 3, 1023):
                label = shorten_bytes(factor * 1024 ** exponent)
                unit = units.index(label[-2])
                self.assertGreaterEqual(unit, last)
                self.assertEqual(unit, exponent - 1)
                last = unit

    def test_huge_values_stay_in_exabytes(self):
        self.assertEqual(shorten_bytes(1024 ** 7), "1024.0EB")


class TestShorteners(unittest.TestCase):
    """End and middle ellipsis"""

    SAMPLES = [
        "",
        "abc",
        "hello world",
        "quay.io/minio/minio:RELEASE.2024-05-10",
        "line one\nline two",
        "héllo wörld ünïcode",
    ]

    def test_shorten_end(self):
        self.assertEqual(shorten("hello world", 5), "hell…")
        self.assertEqual(shorten("hello", 5), "hello")
        self.assertEqual(shorten("hello", 1), "…")

    def test_shorten_middle(self):
        self.assertEqual(shorten_middle("abcdefghij", 5), "ab…ij")
        self.assertEqual(shorten_middle("abcdefghij", 6), "abc…ij")
        self.assertEqual(shorten_middle("abcdefghij", 2), "a…")
        self.assertEqual(shorten_middle("abcdefghij", 10), "abcdefghij")

    def test_counts_characters_not_bytes(self):
        """Multi-byte characters count once"""
        self.assertEqual(shorten("héllo", 5), "héllo")
        self.assertEqual(shorten("héllo wörld", 6), "héllo…")
        self.assertEqual(shorten_middle("wörld", 5), "wörld")

    def test_newlines_always_replaced(self):
        """Newlines are replaced even without truncation"""
        self.assertEqual(shorten("a\nb", 10), "a␤b")
        self.assertEqual(shorten_middle("a\nb", 10), "a␤b")
        self.assertNotIn("\n", shorten("first\nsecond\nthird", 8))
        self.assertNotIn("\n", shorten_middle("first\nsecond\nthird", 8))

    def test_length_bound_and_idempotence(self):
        for shortener in (shorten, shorten_middle):
            for text in self.SAMPLES:
                for length in range(1, 25):
                    result = shortener(text, length)
                    if len(text) > length:
                        self.assertLessEqual(len(result), length)
                    else:
                        self.assertEqual(result, text.replace("\n", "␤"))
                    self.assertEqual(shortener(result, length), result)

    def test_non_positive_length(self):
        """A zero budget still yields a single ellipsis"""
        self.assertEqual(shorten("abc", 0), "…")
        self.assertEqual(shorten_middle("abc", 0), "…")


class TestFormatPorts(unittest.TestCase):
    """Port lists"""

    def test_duplicates_collapse(self):
        """One published port bound on IPv4 and IPv6 shows once"""
        ports = [
            PortBinding(9000, "tcp", 9000, "0.0.0.0"),
            PortBinding(9000, "tcp", 9000, "::"),
            PortBinding(9001, "tcp", 9001, "0.0.0.0"),
        ]
        self.assertEqual(format_ports(ports), "9000→9000,9001→9001")

    def test_verbose_shows_bind_address(self):
        ports = [
            PortBinding(80, "tcp", 8080, "127.0.0.1"),
            PortBinding(80, "tcp", 8080, "::"),
        ]
        self.assertEqual(format_ports(ports, verbose=True), "127.0.0.1:8080→80,[::]:8080→80")
        self.assertNotIn("127.0.0.1", format_ports(ports, verbose=False))

    def test_non_tcp_is_tagged(self):
        ports = [
            PortBinding(53, "udp"),
            PortBinding(53, "udp", 5353, "0.0.0.0"),
            PortBinding(80, "tcp"),
        ]
        self.assertEqual(format_ports(ports), "53/udp,5353→53/udp,80")

    def test_order_is_preserved(self):
        ports = [PortBinding(443), PortBinding(80), PortBinding(443)]
        self.assertEqual(format_ports(ports), "443,80")

    def test_empty(self):
        self.assertEqual(format_ports([]), "")


class TestStateLabel(unittest.TestCase):
    """Container state labels"""

    def test_running(self):
        state = ContainerState(running=True, started_at=NOW - timedelta(hours=2))
        self.assertEqual(state_label(state, NOW), "2h")

    def test_paused(self):
        state = ContainerState(running=True, paused=True, started_at=NOW - timedelta(minutes=3))
        self.assertEqual(state_label(state, NOW), "3mPaused")

    def test_exited(self):
        state = ContainerState(
            exit_code=137,
            started_at=NOW - timedelta(days=5),
            finished_at=NOW - timedelta(days=3),
        )
        self.assertEqual(state_label(state, NOW), "exit(137)3d")

    def test_restarting(self):
        state = ContainerState(
            running=True,
            restarting=True,
            exit_code=1,
            started_at=NOW - timedelta(minutes=1),
            finished_at=NOW - timedelta(seconds=5),
        )
        self.assertEqual(state_label(state, NOW), "restart(1)5s")

    def test_priority_order(self):
        """Dead wins over created, created over a missing finish time"""
        self.assertEqual(state_label(ContainerState(dead=True), NOW), "dead")
        self.assertEqual(state_label(ContainerState(), NOW), "created")
        state = ContainerState(started_at=NOW - timedelta(hours=1))
        self.assertEqual(state_label(state, NOW), "finished=0")


if __name__ == '__main__':
    unittest.main()
