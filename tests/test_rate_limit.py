import sys
import unittest
from dataclasses import replace
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvmatch.core import rate_limit  # noqa: E402
from cvmatch.core.errors import RateLimitExceeded  # noqa: E402
from cvmatch.core.rate_limit import SlidingWindowRateLimiter, client_key  # noqa: E402

ROUTE = "/v1/ai/analyze-cv"


class SlidingWindowRateLimiterTests(unittest.TestCase):
    def setUp(self):
        self.limiter = SlidingWindowRateLimiter(":memory:", limit=3, window_seconds=60)

    def tearDown(self):
        self.limiter.close()

    def test_limit_and_remaining(self):
        remaining = [self.limiter.check("1.1.1.1", ROUTE, now=1000.0 + i) for i in range(3)]
        self.assertEqual(remaining, [2, 1, 0])
        with self.assertRaises(RateLimitExceeded):
            self.limiter.check("1.1.1.1", ROUTE, now=1003.0)

    def test_window_slides(self):
        for i in range(3):
            self.limiter.check("1.1.1.1", ROUTE, now=1000.0 + i)
        with self.assertRaises(RateLimitExceeded):
            self.limiter.check("1.1.1.1", ROUTE, now=1059.0)
        # the first event has left the window
        self.assertEqual(self.limiter.check("1.1.1.1", ROUTE, now=1060.5), 0)

    def test_rejected_requests_are_not_recorded(self):
        for i in range(3):
            self.limiter.check("1.1.1.1", ROUTE, now=1000.0 + i)
        for _ in range(5):
            with self.assertRaises(RateLimitExceeded):
                self.limiter.check("1.1.1.1", ROUTE, now=1010.0)
        self.assertEqual(self.limiter.check("1.1.1.1", ROUTE, now=1061.0), 1)

    def test_clients_and_routes_are_independent(self):
        for i in range(3):
            self.limiter.check("1.1.1.1", ROUTE, now=1000.0 + i)
        self.assertEqual(self.limiter.check("2.2.2.2", ROUTE, now=1003.0), 2)
        self.assertEqual(self.limiter.check("1.1.1.1", "/v1/other", now=1003.0), 2)

    def test_clear(self):
        for i in range(3):
            self.limiter.check("1.1.1.1", ROUTE, now=1000.0 + i)
        self.limiter.clear()
        self.assertEqual(self.limiter.check("1.1.1.1", ROUTE, now=1004.0), 2)

    def test_invalid_configuration(self):
        with self.assertRaises(ValueError):
            SlidingWindowRateLimiter(":memory:", limit=0, window_seconds=60)


class ClientKeyTests(unittest.TestCase):
    def _request(self, headers, host="10.0.0.9"):
        return SimpleNamespace(headers=headers, client=SimpleNamespace(host=host))

    def test_forwarded_for_then_real_ip_then_peer(self):
        self.assertEqual(client_key(self._request({"x-forwarded-for": "203.0.113.7, 10.0.0.1"})), "203.0.113.7")
        self.assertEqual(client_key(self._request({"x-real-ip": "198.51.100.4"})), "198.51.100.4")
        self.assertEqual(client_key(self._request({})), "10.0.0.9")

    def test_proxy_headers_ignored_when_untrusted(self):
        settings = replace(rate_limit.settings, trust_x_forwarded_for=False)
        with patch.object(rate_limit, "settings", settings):
            self.assertEqual(client_key(self._request({"x-forwarded-for": "203.0.113.7"})), "10.0.0.9")


if __name__ == "__main__":
    unittest.main()
