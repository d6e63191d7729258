"""Security monitoring practice"""
import logging
import unittest

from lessons import security_monitor
from lessons.security_monitor import MAX_LOGIN_ATTEMPTS, AccountState, warning_threshold


class TestAccountState(unittest.TestCase):
    def test_starts_unlocked(self):
        account = AccountState(username="alice")
        self.assertEqual(account.failed_attempts, 0)
        self.assertFalse(account.is_locked)

    def test_locks_at_max_attempts(self):
        account = AccountState(username="alice")
        for _ in range(MAX_LOGIN_ATTEMPTS - 1):
            account.record_failure()
        self.assertFalse(account.is_locked)
        account.record_failure()
        self.assertTrue(account.is_locked)
        self.assertEqual(account.failed_attempts, 3)

    def test_lock_is_logged(self):
        account = AccountState(username="bob")
        with self.assertLogs("lessons.security_monitor", level=logging.INFO) as logs:
            for _ in range(MAX_LOGIN_ATTEMPTS):
                account.record_failure()
        self.assertEqual(len(logs.output), 1)
        self.assertIn("bob", logs.output[0])

    def test_warning_threshold(self):
        self.assertEqual(warning_threshold(), 2)


def test_main_output(capsys):
    security_monitor.main()
    out = capsys.readouterr().out
    assert "Account locked: True" in out
    assert "Role after security check: USER" in out
    assert "Blocked IPs after attack wave: 17" in out
    assert "Alert status: Critical Level" in out
    assert "CRITICAL: INITIATING LOCKDOWN (Code: 9999)" in out
    assert "After inner scope: SUSPICIOUS ACTIVITY DETECTED (Code: 4001)" in out
    assert "Final log state: LOGIN SUCCESS" in out
    assert "Warning threshold: 2" in out


if __name__ == "__main__":
    unittest.main()
