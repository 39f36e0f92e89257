"""
Login form detection.

A login form authenticates with an existing password and must never get
strength validation. The decision is a best-effort heuristic over the
form's markup. Unusual third-party markup can fool it; callers can pin
the answer with an override hook or the data-password-strength attribute.
"""
from typing import Callable, Optional


# Explicit markup marker: data-password-strength="login" or "reset"
OVERRIDE_ATTRIBUTE = 'data-password-strength'

LOGIN_FORM_CLASSES = (
    'login',
    'woocommerce-form-login',
    'loginform',
    'wp-login-form',
)

# Markers that identify a password set/reset form
RESET_FORM_CLASSES = (
    'woocommerce-ResetPassword',
    'lost_reset_password',
)
RESET_FORM_IDS = (
    'resetpassform',
)

USERNAME_SELECTOR = (
    'input[name="username"], input[name="user_login"], '
    'input[name="email"], input[type="email"]'
)
LOGIN_SUBMIT_SELECTOR = (
    'input[name="login"], button[name="login"], '
    'input[value*="Login"], input[value*="Anmelden"], '
    'button[value*="Login"], button[value*="Anmelden"]'
)
REMEMBER_ME_SELECTOR = 'input[name="rememberme"], input[name="remember"]'
PASSWORD_SELECTOR = 'input[type="password"]'


class FormClassifier:
    """
    Decide whether a form is a login form.

    Args:
        override: Optional callable ``override(form) -> bool | None``. A
            non-None answer replaces the heuristic entirely.
    """

    def __init__(self, override: Optional[Callable] = None):
        self.override = override

    def is_login_form(self, form) -> bool:
        if form is None:
            return False

        if self.override is not None:
            decision = self.override(form)
            if decision is not None:
                return bool(decision)

        marker = (form.get(OVERRIDE_ATTRIBUTE) or '').strip().lower()
        if marker == 'login':
            return True

        # 1. Known login form classes
        classes = form.get('class') or []
        if isinstance(classes, str):
            classes = classes.split()
        if any(name in classes for name in LOGIN_FORM_CLASSES):
            return True

        if self.has_reset_marker(form, classes, marker):
            return False

        has_username = form.select_one(USERNAME_SELECTOR) is not None
        if not has_username:
            return False

        # 2. Username plus a login button or a "remember me" box
        if form.select_one(LOGIN_SUBMIT_SELECTOR) or form.select_one(REMEMBER_ME_SELECTOR):
            return True

        # 3. Classic single-password login
        if len(form.select(PASSWORD_SELECTOR)) == 1:
            return True

        return False

    def has_reset_marker(self, form, classes, marker) -> bool:
        if marker == 'reset':
            return True
        if any(name in classes for name in RESET_FORM_CLASSES):
            return True
        return form.get('id') in RESET_FORM_IDS


default_classifier = FormClassifier()


def is_login_form(form) -> bool:
    """Classify a form with the default heuristic."""
    return default_classifier.is_login_form(form)
