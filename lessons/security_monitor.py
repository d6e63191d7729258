"""
Lesson 2 practice: a small security monitoring walkthrough.

Covers mutable vs single-assignment names, scope-local bindings,
rebinding a name to a new type, and constants.
"""

from dataclasses import dataclass
from typing import Final

from lessons.log import get_logger

logger = get_logger(__name__)

MAX_LOGIN_ATTEMPTS: Final = 3
ADMIN_PRIVILEGES: Final = "ADMIN"


@dataclass
class AccountState:
    username: str
    failed_attempts: int = 0
    is_locked: bool = False

    def record_failure(self):
        self.failed_attempts += 1
        if self.failed_attempts >= MAX_LOGIN_ATTEMPTS and not self.is_locked:
            self.is_locked = True
            logger.info("account %s locked after %d attempts", self.username, self.failed_attempts)


def warning_threshold() -> int:
    return MAX_LOGIN_ATTEMPTS - 1


def _escalation_alert():
    user_role = "ATTEMPTING_ESCALATION"
    print(f"Security alert: {user_role}")
    threat_level = "HIGH"
    print(f"Threat level: {threat_level}")


def _audit_scope():
    log_entry = "SUSPICIOUS ACTIVITY DETECTED"
    alert_code = 4001
    print(f"Security log: {log_entry} (Code: {alert_code})")

    def lockdown():
        log_entry = "INITIATING LOCKDOWN"
        alert_code = 9999
        print(f"CRITICAL: {log_entry} (Code: {alert_code})")

    lockdown()
    print(f"After inner scope: {log_entry} (Code: {alert_code})")


def main():
    print("=== Security Monitoring System ===\n")

    print("Challenge 1: User Authentication Tracking")
    account = AccountState(username="alice")
    print(f"User: {account.username}")
    print(f"Failed attempts: {account.failed_attempts}")
    print(f"Account locked: {account.is_locked}")

    for _ in range(MAX_LOGIN_ATTEMPTS):
        account.record_failure()

    print("\nAfter failed logins:")
    print(f"Failed attempts: {account.failed_attempts}")
    print(f"Account locked: {account.is_locked}")

    print("\n=== Challenge 2: Permission Escalation Detection ===")
    user_role = "USER"
    print(f"Initial role: {user_role}")
    _escalation_alert()
    print(f"Role after security check: {user_role}")

    print("\n=== Challenge 3: Password Security Levels ===")
    password_strength = 2
    print(f"Initial password strength (1-5): {password_strength}")
    password_strength = 4
    print(f"After adding special characters: {password_strength}")
    password_strength = "STRONG"
    print(f"Security rating: {password_strength}")

    print("\n=== Challenge 4: Firewall Rule Management ===")
    blocked_ips = 0
    print(f"Currently blocked IPs: {blocked_ips}")
    blocked_ips += 5
    blocked_ips += 12
    print(f"Blocked IPs after attack wave: {blocked_ips}")
    blocked_ips = "Critical Level"
    print(f"Alert status: {blocked_ips}")

    print("\n=== Challenge 5: Security Audit Log ===")
    log_entry = "LOGIN SUCCESS"
    print(f"Log: {log_entry}")
    _audit_scope()
    print(f"Final log state: {log_entry}")

    print("\n=== Challenge 6: Constants in Security ===")
    print(f"System configured for max {MAX_LOGIN_ATTEMPTS} login attempts")
    print(f"Admin privileges: {ADMIN_PRIVILEGES}")
    print(f"Warning threshold: {warning_threshold()}")

    print("\n=== System Status ===")
    print("Security monitoring active ✓")


if __name__ == "__main__":
    main()
