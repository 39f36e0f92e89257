"""
Project-level settings for the password strength app.

Override any key through the ``PASSWORD_STRENGTH`` dict in Django settings.
"""
from django.conf import settings

from enforcer.config import CONFIG_ELEMENT_ID
from enforcer.controller import MESSAGE_ELEMENT_ID


DEFAULTS = {
    'ENABLED': True,
    'MESSAGE_ELEMENT_ID': MESSAGE_ELEMENT_ID,
    'CONFIG_ELEMENT_ID': CONFIG_ELEMENT_ID,
    'RETRY_MAX_ATTEMPTS': 10,
    'RETRY_BASE_DELAY': 0.1,
    'SETTLE_DELAY': 0.1,
}


def get_setting(name):
    overrides = getattr(settings, 'PASSWORD_STRENGTH', None) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
