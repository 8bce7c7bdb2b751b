"""Tests for authenticity token issuing and checking."""

from inplace_editing.core.config import SecuritySettings
from inplace_editing.core.csrf import ForgeryProtection


def test_issued_token_verifies():
    protection = ForgeryProtection(SecuritySettings(secret_key="first-secret"))

    assert protection.is_active is True
    assert protection.verify_token(protection.form_authenticity_token()) is True


def test_token_from_another_secret_is_rejected():
    issuer = ForgeryProtection(SecuritySettings(secret_key="first-secret"))
    checker = ForgeryProtection(SecuritySettings(secret_key="second-secret"))

    assert checker.verify_token(issuer.form_authenticity_token()) is False
    assert checker.verify_token("") is False
    assert checker.verify_token(None) is False


def test_expired_token_is_rejected():
    protection = ForgeryProtection(
        SecuritySettings(secret_key="first-secret", csrf_token_expire_minutes=-1)
    )

    assert protection.verify_token(protection.form_authenticity_token()) is False


def test_protection_can_be_disabled():
    protection = ForgeryProtection(SecuritySettings(secret_key="first-secret", csrf_enabled=False))

    assert protection.is_active is False
